"""Shared test fixtures — throwaway directory trees under tmp_path."""

import os
import sys
from pathlib import Path

import pytest

from folio.browser.lister import DirectoryLister
from folio.browser.locations import FixedLocationProvider


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with one visible dir, one visible file, one hidden file."""
    root = tmp_path / "sample"
    root.mkdir()
    (root / "Zebra").mkdir()
    (root / "apple.txt").write_text("apple")
    (root / ".hidden").write_text("secret")
    return root


@pytest.fixture
def undecodable_dir(tmp_path: Path) -> Path:
    """Directory holding one file whose name is not valid UTF-8."""
    if sys.platform != "linux":
        pytest.skip("needs a filesystem that stores raw name bytes")
    root = tmp_path / "raw"
    root.mkdir()
    with open(os.fsencode(root) + b"/caf\xff", "wb"):
        pass
    return root


@pytest.fixture
def home_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Stand-in home directory with a single visible file.

    Lives outside ``tmp_path`` so tests can list ``tmp_path`` itself.
    """
    home = tmp_path_factory.mktemp("home")
    (home / "notes.md").write_text("# notes")
    return home


@pytest.fixture
def lister(home_dir: Path) -> DirectoryLister:
    """Lister whose default location is ``home_dir``."""
    return DirectoryLister(FixedLocationProvider(home_dir))
