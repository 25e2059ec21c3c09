"""Tests for default-location providers."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from folio.browser.locations import (
    FixedLocationProvider,
    HomeLocationProvider,
)


class TestHomeLocationProvider:
    def test_returns_home(self, tmp_path: Path) -> None:
        with patch(
            "folio.browser.locations.Path.home", return_value=tmp_path
        ):
            assert HomeLocationProvider().default() == tmp_path

    def test_falls_back_to_root_when_home_unknown(self) -> None:
        with patch(
            "folio.browser.locations.Path.home",
            side_effect=RuntimeError("Could not determine home directory."),
        ):
            assert HomeLocationProvider().default() == Path("/")

    def test_unexpanded_tilde_falls_back(self) -> None:
        with patch(
            "folio.browser.locations.Path.home", return_value=Path("~")
        ):
            assert HomeLocationProvider().default() == Path("/")

    def test_custom_fallback(self, tmp_path: Path) -> None:
        with patch(
            "folio.browser.locations.Path.home",
            side_effect=KeyError("HOME"),
        ):
            provider = HomeLocationProvider(fallback=tmp_path)
            assert provider.default() == tmp_path

    def test_fallback_logged_at_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            caplog.at_level(
                logging.DEBUG, logger="folio.browser.locations"
            ),
            patch(
                "folio.browser.locations.Path.home",
                side_effect=RuntimeError("no home"),
            ),
        ):
            HomeLocationProvider().default()
        assert "event=home_unresolved" in caplog.text
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestFixedLocationProvider:
    def test_accepts_str_and_path(self, tmp_path: Path) -> None:
        assert FixedLocationProvider(str(tmp_path)).default() == tmp_path
        assert FixedLocationProvider(tmp_path).default() == tmp_path
