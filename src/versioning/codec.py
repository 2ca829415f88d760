"""Encode semantic versions as comparable integers.

A version ``major.minor.patch`` maps to ``major * 10000 + minor * 100 + patch``
so that plain integer comparison orders versions correctly. Pre-release and
build metadata are dropped before encoding.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

import semantic_version

Version = Tuple[int, int, int]

ZERO_VERSION: Version = (0, 0, 0)

_MAJOR_WEIGHT = 10000
_MINOR_WEIGHT = 100
_COMPONENT_MAX = 99

# Leading numeric part of a version, e.g. "8.1.1" out of "8.1.1-rc.1"
_LEADING_VERSION = re.compile(r"^\s*v?(\d+(?:\.\d+){0,2})")


def parse(version_string: Optional[str]) -> Version:
    """Parse a version string into ``(major, minor, patch)``.

    Missing components default to 0. Anything after ``-`` or ``+`` is
    ignored. Returns ``ZERO_VERSION`` when nothing can be parsed.
    """
    if not isinstance(version_string, str):
        return ZERO_VERSION
    m = _LEADING_VERSION.match(version_string)
    if not m:
        return ZERO_VERSION
    try:
        parsed = semantic_version.Version.coerce(m.group(1))
    except ValueError:
        return ZERO_VERSION
    return parsed.major, parsed.minor, parsed.patch


def encode(major: int, minor: int = 0, patch: int = 0) -> int:
    """Encode version components as a single integer.

    Raises:
        ValueError: If a component is negative or minor/patch exceed 99.
    """
    if major < 0 or not 0 <= minor <= _COMPONENT_MAX or not 0 <= patch <= _COMPONENT_MAX:
        raise ValueError(f"Version component out of range: {major}.{minor}.{patch}")
    return major * _MAJOR_WEIGHT + minor * _MINOR_WEIGHT + patch


# Short alias used by version tables
v = encode


def decode(number: int) -> Version:
    """Inverse of ``encode``."""
    if number < 0:
        raise ValueError(f"Invalid version number: {number}")
    major, rest = divmod(number, _MAJOR_WEIGHT)
    minor, patch = divmod(rest, _MINOR_WEIGHT)
    return major, minor, patch


def to_version_number(version_string: Optional[str]) -> int:
    """Parse ``version_string`` and encode it; unparseable input yields 0."""
    major, minor, patch = parse(version_string)
    try:
        return encode(major, minor, patch)
    except ValueError:
        return 0
