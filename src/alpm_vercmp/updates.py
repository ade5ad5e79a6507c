"""
Update Calculator

Computes available package updates by comparing installed package versions
against the versions offered by sync repositories, the way ``pacman -Qu``
reports them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .evr import EVR, parse_evr
from .vercmp import ComparisonResult, compare_versions

logger = logging.getLogger(__name__)


class PackageNotFoundError(LookupError):
    """Raised when a package is not installed."""

    def __init__(self, name: str):
        super().__init__(f"No package {name} found!")
        self.name = name


@dataclass
class PackageUpdate:
    """Represents an available package update."""

    name: str
    repo: str
    installed_version: str
    available_version: str

    @property
    def installed_evr(self) -> EVR:
        """Return the parsed installed version."""
        return parse_evr(self.installed_version)

    @property
    def available_evr(self) -> EVR:
        """Return the parsed available version."""
        return parse_evr(self.available_version)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "repo": self.repo,
            "installed": self.installed_version,
            "available": self.available_version,
        }

    def __str__(self) -> str:
        return f"{self.name} {self.installed_version} -> {self.available_version}"


@dataclass
class UpdateResult:
    """Results of update computation for one set of installed packages."""

    computed_at: str
    updates: list[PackageUpdate] = field(default_factory=list)
    downgrades: list[PackageUpdate] = field(default_factory=list)
    foreign: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def update_count(self) -> int:
        """Return number of available updates."""
        return len(self.updates)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "computed_at": self.computed_at,
            "update_count": self.update_count,
            "updates": [u.to_dict() for u in self.updates],
            "downgrades": [d.to_dict() for d in self.downgrades],
            "foreign": self.foreign,
            "errors": self.errors,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def _utcnow() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def query_package_version(installed: Mapping[str, str], name: str) -> str:
    """
    Look up the installed version of a package.

    Args:
        installed: Mapping of installed package name to version
        name: Package name

    Returns:
        Version string, e.g. "5.0.2-2"

    Raises:
        PackageNotFoundError: If the package is not installed
    """
    try:
        return installed[name]
    except KeyError:
        raise PackageNotFoundError(name) from None


class UpdateCalculator:
    """
    Computes available package updates.

    Repositories are searched in the order given; the first repository that
    carries a package provides its candidate version.
    """

    def __init__(self, repos: Mapping[str, Mapping[str, str]]):
        """
        Initialize the update calculator.

        Args:
            repos: Ordered mapping of repository name to a mapping of
                package name to version
        """
        self.repos = repos

    def find_package(self, name: str) -> tuple[str, str] | None:
        """
        Find the repository version of a package.

        Args:
            name: Package name

        Returns:
            (repository, version) or None if no repository has the package
        """
        for repo, packages in self.repos.items():
            version = packages.get(name)
            if version is not None:
                return repo, version
        return None

    def compute_updates(self, installed: Mapping[str, str]) -> UpdateResult:
        """
        Compute available updates for a set of installed packages.

        Args:
            installed: Mapping of installed package name to version

        Returns:
            UpdateResult with updates, downgrades and foreign packages
        """
        result = UpdateResult(computed_at=_utcnow())

        if not installed:
            result.errors.append("No installed packages given")
            return result

        for name in sorted(installed):
            installed_version = installed[name]

            if not isinstance(installed_version, str) or not installed_version:
                result.errors.append(f"Invalid installed version for {name}: {installed_version!r}")
                continue

            found = self.find_package(name)
            if found is None:
                logger.debug(f"{name} not found in any repository")
                result.foreign.append(name)
                continue

            repo, available_version = found
            if not isinstance(available_version, str) or not available_version:
                result.errors.append(f"Invalid version for {name} in {repo}: {available_version!r}")
                continue

            update = PackageUpdate(
                name=name,
                repo=repo,
                installed_version=installed_version,
                available_version=available_version,
            )

            ordering = compare_versions(installed_version, available_version)
            if ordering == ComparisonResult.LESS:
                logger.debug(f"Update for {update}")
                result.updates.append(update)
            elif ordering == ComparisonResult.GREATER:
                logger.warning(f"{name}: local ({installed_version}) is newer than {repo} ({available_version})")
                result.downgrades.append(update)

        return result

    def generate_summary(self, result: UpdateResult) -> dict[str, Any]:
        """
        Generate a summary of an update computation.

        Args:
            result: UpdateResult from compute_updates

        Returns:
            Summary dictionary
        """
        return {
            "generated_at": _utcnow(),
            "repos": list(self.repos),
            "total_updates": result.update_count,
            "total_downgrades": len(result.downgrades),
            "total_foreign": len(result.foreign),
            "total_errors": len(result.errors),
        }
