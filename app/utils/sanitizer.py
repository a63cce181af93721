"""HTML escaping for user-supplied text embedded in emails."""

_HTML_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str | None) -> str:
    """Escape `& < > " '` so text can be interpolated into HTML."""
    if not text:
        return ""
    escaped = str(text)
    # "&" goes first so entities produced below are not escaped twice
    for char, entity in _HTML_ENTITIES:
        escaped = escaped.replace(char, entity)
    return escaped
