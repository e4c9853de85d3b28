from __future__ import annotations

import logging

import pytest

from dex_sdk.utils.logger import resolve_level, setup_logging


@pytest.mark.parametrize(
    ("name", "expected"),
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
)
def test_resolve_level_known_names(name, expected) -> None:
    assert resolve_level(name) == expected


@pytest.mark.parametrize("name", ["basic_format", "BASIC_FORMAT", "root", "", "verbose"])
def test_resolve_level_falls_back_to_info(name) -> None:
    assert resolve_level(name) == logging.INFO


def test_setup_logging_ignores_unknown_level() -> None:
    setup_logging("basic_format")
