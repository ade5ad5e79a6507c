"""
EVR Parsing

Splits pacman package version strings into their epoch, version and release
fields. The format is ``[epoch:]version[-release]``, e.g. ``1:2.3.4-1``.
"""

from dataclasses import dataclass
from typing import Optional

EPOCH_SEPARATOR = ":"
RELEASE_SEPARATOR = "-"


@dataclass(frozen=True)
class EVR:
    """
    Represents a parsed package version.

    Attributes:
        epoch: Text before the epoch separator, or None if absent
        version: Version text (always present, possibly empty)
        release: Text after the release separator, or None if absent
    """

    epoch: Optional[str]
    version: str
    release: Optional[str] = None

    @property
    def epoch_or_default(self) -> str:
        """Return the epoch, treating an absent epoch as "0"."""
        return self.epoch if self.epoch is not None else "0"

    def __str__(self) -> str:
        return format_evr(self.epoch, self.version, self.release)


def parse_evr(s: str) -> EVR:
    """
    Parse a version string into its EVR fields.

    The epoch ends at the first ":" seen before any "-". A ":" at position 0
    is consumed as a separator but yields no epoch, and later colons are then
    part of the version (":1:2-3" -> version "1:2"). The version ends at the
    first "-" after the epoch; everything behind it is the release, kept
    verbatim even when it contains further hyphens.

    Examples:
        "2:643.2b-43" -> EVR("2", "643.2b", "43")
        "643.2b"      -> EVR(None, "643.2b", None)
        "1-2-3"       -> EVR(None, "1", "2-3")

    Args:
        s: Raw version string

    Returns:
        EVR for any input; parsing never fails
    """
    epoch = None
    epoch_seen = False
    version_start = 0
    version_end = None

    for index, char in enumerate(s):
        if char == EPOCH_SEPARATOR and not epoch_seen:
            epoch_seen = True
            if index > 0:
                epoch = s[:index]
            version_start = index + 1
        elif char == RELEASE_SEPARATOR:
            version_end = index
            break

    if version_end is None:
        return EVR(epoch=epoch, version=s[version_start:], release=None)

    return EVR(
        epoch=epoch,
        version=s[version_start:version_end],
        release=s[version_end + 1:],
    )


# Name used by callers that think in terms of "parse a version"
parse_version = parse_evr


def format_evr(
    epoch: Optional[str], version: str, release: Optional[str] = None
) -> str:
    """
    Format epoch-version-release string.

    Absent fields are omitted together with their separators.

    Args:
        epoch: Package epoch or None
        version: Package version
        release: Package release or None

    Returns:
        Formatted EVR string
    """
    result = version
    if epoch is not None:
        result = f"{epoch}{EPOCH_SEPARATOR}{result}"
    if release is not None:
        result = f"{result}{RELEASE_SEPARATOR}{release}"
    return result
