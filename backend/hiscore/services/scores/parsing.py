import math
from typing import Optional, Union

Number = Union[int, float]


def parse_number(value) -> Optional[Number]:
    """Parse a JSON number or numeric string. Returns None when it isn't one.

    Booleans are rejected even though they are ints in Python, as are NaN
    and the infinities.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text or '_' in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def parse_integer(value) -> Optional[int]:
    """Like parse_number, but only whole values pass (5 and 5.0, not 5.5)."""
    parsed = parse_number(value)
    if parsed is None:
        return None
    if isinstance(parsed, float):
        if not parsed.is_integer():
            return None
        return int(parsed)
    return parsed


def parse_optional_number(value) -> Optional[Number]:
    """Query-string flavour: None or '' means the filter was not supplied."""
    if value is None or value == '':
        return None
    return parse_number(value)
