"""Git's rules for reading typed configuration values."""

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0", ""})

_INT_UNITS = {"k": 1024, "m": 1024**2, "g": 1024**3}


def parse_git_bool(value: str | None) -> bool:
    """Interpret a configuration value the way `git config --type=bool` does.

    A key written without '=' (value None) is true.

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    if value is None:
        return True
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_git_int(value: str | None) -> int:
    """Interpret a configuration value the way `git config --type=int` does.

    Raises:
        ValueError: If the value is not a decimal integer with an optional k/m/g suffix
    """
    if value is None:
        raise ValueError("missing integer value")
    text = value.strip()
    factor = 1
    if text and text[-1].lower() in _INT_UNITS:
        factor = _INT_UNITS[text[-1].lower()]
        text = text[:-1]
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an integer: {value!r}")
    return int(text) * factor
