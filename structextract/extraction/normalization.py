import re

# Optional leading whitespace, then a half- or full-width parenthetical,
# which may span line breaks.
_PARENTHETICAL = re.compile(r"\s*[(（].*?[)）]", re.DOTALL)


def strip_parenthetical(value: str) -> str:
    """Remove material-grade annotations such as "(SD345)" or "（SD295）".

    Values without an annotation are returned as given.

    >>> strip_parenthetical("24-D25 (SD345)")
    '24-D25'
    """
    stripped, count = _PARENTHETICAL.subn("", value)
    if not count:
        return value
    return stripped.strip()


def has_parenthetical(value: str) -> bool:
    return _PARENTHETICAL.search(value) is not None
