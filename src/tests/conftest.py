"""
Pytest configuration and fixtures for alpm-vercmp tests.
"""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
import yaml


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_repos():
    """Provide sync repositories in pacman search order."""
    return {
        "core": {
            "pacman": "6.0.2-7",
            "linux": "6.5.9.arch2-1",
            "glibc": "2.38-7",
        },
        "extra": {
            "pacman": "7.0.0-1",  # Shadowed by core
            "firefox": "119.0-1",
            "python": "3.11.5-3",
        },
    }


@pytest.fixture
def sample_installed():
    """Provide locally installed package versions."""
    return {
        "pacman": "6.0.2-6",  # Older than core
        "linux": "6.5.9.arch2-1",  # Same as core
        "glibc": "2.39-1",  # Newer than core
        "firefox": "118.0.2-1",  # Older than extra
        "python": "3.11.5-3",  # Same as extra
        "yay": "12.1.3-1",  # Not in any repo
    }


@pytest.fixture
def state_file(temp_dir, sample_installed, sample_repos):
    """Write a YAML state file for the updates command."""
    path = temp_dir / "state.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(
            {"installed": sample_installed, "repos": sample_repos},
            f,
            sort_keys=False,
        )
    return path


@pytest.fixture
def version_pairs():
    """Provide pairs of versions for comparison testing."""
    return [
        # (a, b, expected)
        # -1 = a is older, 0 = same, 1 = a is newer
        ("1", "1.0-2", -1),
        ("1.1", "1.1.2", -1),
        ("1.1", "1.2", -1),
        ("1.9", "2", -1),
        ("1.1.10", "2", -1),
        ("1", "2", -1),
        ("1.0", "1.0-2", 0),  # release only on one side
        ("1:1-1", "1:1-1", 0),
        ("2.0-1", "1.0-1", 1),
        ("1.0a", "1.0", -1),  # letter suffix is older
        ("1.0rc1", "1.0", -1),
        ("1.0", "1.0.1", -1),
        ("1.0alpha", "1.0beta", -1),
        ("1.0.a", "1.0.1", -1),  # digits outrank letters
        ("010", "10", 0),  # leading zeros
        ("1.0-1", "1.0-2", -1),
        ("1.0-10", "1.0-9", 1),
        ("1.0-1.1", "1.0-1", 1),
        ("1:1.0", "2.0", 1),  # epoch 1 beats implicit 0
        ("2:1.0", "1:9.9-9", 1),
        ("0:1.0", "1.0", 0),
    ]
