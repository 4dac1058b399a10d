"""Shared fixtures for the soulhash test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_soulhash_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so later tests never write to a closed stream."""
    yield
    logger = logging.getLogger("soulhash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def write_file(tmp_path: Path):
    """Factory writing *content* to ``tmp_path / name`` and returning the path."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write
