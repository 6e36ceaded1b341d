"""Shared fixtures for binaryscarf tests."""

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from binaryscarf.core.color import Color
from binaryscarf.core.config import ScarfConfig

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


@pytest.fixture
def default_config() -> ScarfConfig:
    """Stock settings: 3 columns, spacing 2, border 2, 2x3 px stitches."""
    return ScarfConfig()


@pytest.fixture
def unit_config() -> ScarfConfig:
    """One-pixel stitches with no spacing or border, for easy coordinates."""
    return ScarfConfig(
        columns=2,
        spacing=0,
        border=0,
        stitch_width=1,
        stitch_height=1,
        palette=(WHITE, BLACK),
    )


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app() -> typer.Typer:
    from binaryscarf.cli.app import create_app
    return create_app()


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A small multi-line text file with Windows line endings."""
    path = tmp_path / "poem.txt"
    path.write_bytes(b"Hello,\r\nworld!\r\n\tBinary scarf.\r\n")
    return path
