"""Cell text normalisation shared by every extraction step."""

from tablesnap.extraction.patterns import INVISIBLE_CHAR_RE, SORT_ICON_RE, WHITESPACE_RE


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: str) -> str:
    """Strip sort glyphs and invisible characters, then collapse whitespace.

    Idempotent: ``clean_text(clean_text(x)) == clean_text(x)``.
    """
    text = SORT_ICON_RE.sub("", text)
    text = INVISIBLE_CHAR_RE.sub("", text)
    return collapse_whitespace(text)
