"""Browsing core: directory listing, parent navigation, entry model."""

from folio.browser.errors import DirectoryReadFailed, FolioError
from folio.browser.lister import DirectoryLister, entry_sort_key
from folio.browser.locations import (
    FixedLocationProvider,
    HomeLocationProvider,
    LocationProvider,
)
from folio.browser.models import DirectoryEntry, DirectoryListing
from folio.browser.navigator import parent_path

__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "DirectoryLister",
    "DirectoryReadFailed",
    "FixedLocationProvider",
    "FolioError",
    "HomeLocationProvider",
    "LocationProvider",
    "entry_sort_key",
    "parent_path",
]
