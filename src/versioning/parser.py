"""Version string normalization utilities."""

import re
from typing import List, Optional

_RELEASE_SUFFIX = re.compile(r"[.-]RELEASE\Z", re.IGNORECASE)
_V_PREFIX = re.compile(r"\Av", re.IGNORECASE)
_SEPARATORS = re.compile(r"[.-]")

PREFIX_FIELDS = 3


def sanitize(version: Optional[str]) -> str:
    """Strip the suffixes and prefix the Initializr API rejects.

    Removes a trailing ``.RELEASE`` or ``-RELEASE`` and a leading ``v``,
    all case-insensitively. Stacked affixes ("vv1.0.RELEASE.RELEASE") are
    stripped until none remain, so sanitize(sanitize(x)) == sanitize(x).
    """
    if not version:
        return ""
    previous = None
    result = version
    while result != previous:
        previous = result
        result = _RELEASE_SUFFIX.sub("", result)
        result = _V_PREFIX.sub("", result)
    return result


def split_fields(version: str) -> List[str]:
    """Split a version on ``.`` and ``-``."""
    return _SEPARATORS.split(version) if version else []


def version_prefix(version: str, fields: int = PREFIX_FIELDS) -> str:
    """Return the first ``fields`` fields of ``version`` joined by ``.``.

    Shorter versions yield only the fields they have ("3.5" -> "3.5");
    empty fields are dropped so "3..1" never produces a dangling separator.
    """
    parts = [p for p in split_fields(version) if p]
    return ".".join(parts[:fields])


def matches_prefix(version_id: str, prefix: str) -> bool:
    """True when ``version_id`` starts with ``prefix``.

    A plain string prefix: "3.5.6" matches "3.5.6-SNAPSHOT" and also "3.5.60".
    """
    return bool(prefix) and version_id.startswith(prefix)
