from typing import NamedTuple

TRUNCATE_LENGTH = 400

ELLIPSIS = "…"


class NormalizedText(NamedTuple):
    # What gets shown to most viewers
    content: str
    # The verbatim text for monologues, empty otherwise
    full_content: str


def truncate(text: str, length: int = TRUNCATE_LENGTH) -> str:
    """
    Cuts text down for display.

    A newline at or before `length` ends the text there (no ellipsis);
    otherwise anything longer than `length` is cut at exactly `length`
    characters and gets an ellipsis. Newlines after `length` don't count.
    """
    cutoff = text.find("\n")
    if 0 <= cutoff <= length:
        return text[:cutoff]
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text


def normalize(text: str, monologue: bool = False) -> NormalizedText:
    return NormalizedText(
        content=truncate(text),
        full_content=text if monologue else "",
    )
