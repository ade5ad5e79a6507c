"""
alpm-vercmp

Parses pacman package version strings ([epoch:]version[-release]) and
compares them with the same ordering libalpm uses.
"""

from .evr import EVR, format_evr, parse_evr, parse_version
from .updates import (
    PackageNotFoundError,
    PackageUpdate,
    UpdateCalculator,
    UpdateResult,
    query_package_version,
)
from .vercmp import ComparisonResult, compare_versions, is_newer, newest, sort_versions, vercmp

__all__ = [
    "EVR",
    "ComparisonResult",
    "PackageNotFoundError",
    "PackageUpdate",
    "UpdateCalculator",
    "UpdateResult",
    "compare_versions",
    "format_evr",
    "is_newer",
    "newest",
    "parse_evr",
    "parse_version",
    "query_package_version",
    "sort_versions",
    "vercmp",
]

__version__ = "1.0.0"
