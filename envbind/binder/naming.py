"""
Field Name Conversion

Word splitting shared by flag-style names (kebab-case) and environment
keys (SCREAMING_SNAKE_CASE). Both conversions must split words the same
way so that ``MaxRetries`` under ``server-`` yields ``server-max-retries``
and ``SERVER_MAX_RETRIES``.
"""

_SEPARATORS = frozenset(" _-.")


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def to_delimited(name: str, delimiter: str, screaming: bool = False) -> str:
    """
    Split ``name`` into words and join them with ``delimiter``.

    Word boundaries are lower-to-upper transitions, letter/digit
    transitions and the last capital of an acronym followed by a lower
    case letter (``HTTPServer`` -> ``http``, ``server``). Spaces,
    underscores, hyphens and dots are replaced by the delimiter one for
    one, so a trailing hyphen survives and already-delimited input is
    returned unchanged.

    Only ASCII letters change case.
    """
    name = name.strip()
    out: list[str] = []
    size = len(name)

    for i, ch in enumerate(name):
        upper = _is_upper(ch)
        lower = _is_lower(ch)
        digit = _is_digit(ch)

        if lower and screaming:
            ch = ch.upper()
        elif upper and not screaming:
            ch = ch.lower()

        if i + 1 < size:
            nxt = name[i + 1]
            next_upper = _is_upper(nxt)
            next_lower = _is_lower(nxt)
            next_digit = _is_digit(nxt)

            if (
                (upper and (next_lower or next_digit))
                or (lower and (next_upper or next_digit))
                or (digit and (next_upper or next_lower))
            ):
                # acronym end: "PServer" -> "p-server"
                if upper and next_lower and i > 0 and _is_upper(name[i - 1]):
                    out.append(delimiter)
                out.append(ch)
                if lower or digit or next_digit:
                    out.append(delimiter)
                continue

        out.append(delimiter if ch in _SEPARATORS else ch)

    return "".join(out)


def hyphenate(name: str) -> str:
    """Convert a field name to lowercase kebab-case (``MaxRetries`` -> ``max-retries``)."""
    return to_delimited(name, "-")


def screaming_snake(name: str) -> str:
    """Convert a name to upper snake case (``server-max-retries`` -> ``SERVER_MAX_RETRIES``)."""
    return to_delimited(name, "_", screaming=True)
