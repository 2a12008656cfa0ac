from __future__ import annotations

import re
from typing import Optional

_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")


# PUBLIC_INTERFACE
def parse_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a todo id from a path segment using integer-prefix semantics.

    Leading whitespace and an optional sign are accepted and anything after
    the leading digits is ignored, so "12abc" parses to 12. Returns None when
    the segment does not start with an integer, or when the digit run is too
    long for int conversion; callers treat that as an id matching no todo.
    """
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Exceeds the interpreter's int string conversion limit
        return None
