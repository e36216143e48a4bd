"""Latest-version selection over published release strings."""

from __future__ import annotations

import re
from collections.abc import Iterable

from packaging.version import InvalidVersion, Version

# Digits and dot separators only: excludes rc/dev/post tags and local labels.
_RELEASE_RE = re.compile(r"[0-9.]+")


def is_release_version(candidate: str) -> bool:
    """True if *candidate* is made solely of digits and separators."""
    return _RELEASE_RE.fullmatch(candidate) is not None


def select_latest_version(candidates: Iterable[str]) -> str | None:
    """Return the greatest release version string among *candidates*.

    Strings with anything besides digits and dots are skipped before parsing;
    strings that still fail to parse are dropped. Returns None when nothing
    qualifies. The original string is returned, not a normalised form.
    """
    best: tuple[Version, str] | None = None
    for candidate in candidates:
        if not is_release_version(candidate):
            continue
        try:
            parsed = Version(candidate)
        except InvalidVersion:
            continue
        if best is None or parsed > best[0]:
            best = (parsed, candidate)
    return best[1] if best else None
