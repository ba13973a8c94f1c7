from activities.services.text import ELLIPSIS, normalize, truncate


def test_truncate_short_text_unchanged():
    assert truncate("Hello, world!") == "Hello, world!"
    assert truncate("a" * 400) == "a" * 400


def test_truncate_long_text():
    """
    Anything over the limit without an early newline is cut at exactly 400
    characters and gets a single ellipsis.
    """
    result = truncate("b" * 401)
    assert result == "b" * 400 + ELLIPSIS
    assert len(result) == 401
    assert truncate("c" * 5000) == "c" * 400 + ELLIPSIS


def test_truncate_newline():
    """
    The first newline ends the display text, with no ellipsis, no matter how
    long the rest is.
    """
    assert truncate("hello\nworld") == "hello"
    assert truncate("hello\n" + "x" * 1000) == "hello"
    assert truncate("\nleading") == ""
    # A newline exactly at the limit still counts
    assert truncate("d" * 400 + "\nmore") == "d" * 400


def test_truncate_late_newline():
    """
    Newlines after the limit don't count
    """
    text = "e" * 450 + "\nrest"
    assert truncate(text) == "e" * 400 + ELLIPSIS


def test_normalize_plain():
    normalized = normalize("f" * 500)
    assert normalized.content == "f" * 400 + ELLIPSIS
    assert normalized.full_content == ""


def test_normalize_monologue():
    text = "g" * 1000
    normalized = normalize(text, monologue=True)
    assert normalized.full_content == text
    assert len(normalized.content) <= 401
