import pytest

from activities.services.processing import (
    HashtagProcessor,
    LanguageDetector,
    MentionProcessor,
)


@pytest.mark.django_db
def test_mentions(identity, other_identity, remote_identity, post_factory):
    post = post_factory(
        identity,
        content="Hello @other and @test@remote.test, not you @nobody",
    )
    MentionProcessor().process(post)
    assert set(post.mentions.all()) == {other_identity, remote_identity}


@pytest.mark.django_db
def test_mentions_include_reply_author(identity, other_identity, post_factory):
    parent = post_factory(other_identity)
    post = post_factory(identity, content="No handles here", in_reply_to=parent)
    MentionProcessor().process(post)
    assert list(post.mentions.all()) == [other_identity]


@pytest.mark.django_db
def test_mentions_read_full_content(identity, other_identity, post_factory):
    """
    Handles cut off by truncation still count
    """
    post = post_factory(
        identity,
        content="Short version",
        full_content="Short version\nand then @other",
    )
    MentionProcessor().process(post)
    assert list(post.mentions.all()) == [other_identity]


@pytest.mark.django_db
def test_hashtags(identity, post_factory):
    post = post_factory(identity, content="Trying #Python and #django, #python again")
    HashtagProcessor().process(post)
    assert sorted(post.hashtags.values_list("hashtag", flat=True)) == [
        "django",
        "python",
    ]


@pytest.mark.django_db
def test_no_language_detected(identity):
    assert LanguageDetector().detect("Bonjour tout le monde", identity) is None


@pytest.mark.django_db
def test_hashtags_stop_at_brackets(identity, post_factory):
    post = post_factory(identity, content="Look at #foo(bar) and (#baz)")
    HashtagProcessor().process(post)
    assert sorted(post.hashtags.values_list("hashtag", flat=True)) == ["baz", "foo"]
