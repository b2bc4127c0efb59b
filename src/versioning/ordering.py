"""Generic version ordering.

Versions are compared as sequences of numeric and alphabetic segments, the
way ``sort -V`` does: numeric segments compare numerically, alphabetic ones
lexicographically, and when all shared segments are equal the shorter
sequence sorts first ("3.5.6" < "3.5.6-SNAPSHOT").
"""

import re
from functools import total_ordering
from typing import Iterable, Optional, Tuple

_SEGMENT = re.compile(r"\d+|[A-Za-z]+")


@total_ordering
class _Segment:
    __slots__ = ("numeric", "value")

    def __init__(self, token: str):
        self.numeric = token.isdigit()
        self.value = int(token) if self.numeric else token

    def __eq__(self, other) -> bool:
        return self.numeric == other.numeric and self.value == other.value

    def __lt__(self, other) -> bool:
        if self.numeric and other.numeric:
            return self.value < other.value
        if self.numeric != other.numeric:
            # digits before letters, as in sort -V
            return self.numeric
        return self.value < other.value

    def __repr__(self) -> str:
        return f"_Segment({self.value!r})"


def segments(version: str) -> Tuple[_Segment, ...]:
    """Break a version into comparable segments; separators are ignored."""
    return tuple(_Segment(tok) for tok in _SEGMENT.findall(version or ""))


def version_key(version: str) -> Tuple[Tuple[_Segment, ...], str]:
    """Sort key for ``sorted``/``max``; the raw string breaks exact ties."""
    return segments(version), version


def highest(versions: Iterable[str]) -> Optional[str]:
    """Return the version-order-highest entry, or None if there is none."""
    items = list(versions)
    if not items:
        return None
    return max(items, key=version_key)


def is_snapshot(version: str, marker: str = "snapshot") -> bool:
    return marker.lower() in (version or "").lower()


def highest_stable(versions: Iterable[str], marker: str = "snapshot") -> Optional[str]:
    """Highest version whose id does not contain the snapshot marker."""
    return highest(v for v in versions if not is_snapshot(v, marker))
