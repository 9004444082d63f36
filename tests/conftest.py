"""Pytest configuration and shared fixtures for bfh-plots tests."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # headless rendering

import matplotlib.pyplot as plt
import pytest
from PIL import Image

from bfh_plots import config, fonts, style


class CountingSource:
    """Fake font enumeration that records how often it is queried."""

    def __init__(self, families=None):
        self.families = families
        self.calls = 0
        self.__name__ = "counting_source"

    def __call__(self):
        self.calls += 1
        return None if self.families is None else set(self.families)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Reset process-wide state touched by the package."""
    monkeypatch.setattr(config, "_logo_root", None)
    monkeypatch.setattr(style, "_applied", False)
    monkeypatch.delenv(config.LOGO_ROOT_ENV, raising=False)
    monkeypatch.delenv(config.SKIP_FONT_CHECKS_ENV, raising=False)
    fonts.default_resolver.cache.clear()
    yield
    plt.close("all")
    matplotlib.rcdefaults()


@pytest.fixture
def counting_source():
    return CountingSource


@pytest.fixture
def fake_fonts(monkeypatch):
    """Swap the process-wide resolver for one that sees only Arial."""
    source = CountingSource({"Arial", "DejaVu Sans"})
    monkeypatch.setattr(fonts, "default_resolver", fonts.FontResolver(sources=[source]))
    return source


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A real 40x20 PNG."""
    path = tmp_path / "logo.png"
    Image.new("RGBA", (40, 20), (0, 125, 187, 255)).save(path, "PNG")
    return path


@pytest.fixture
def jpeg_file(tmp_path: Path) -> Path:
    """A real 30x30 JPEG with a .jpg extension."""
    path = tmp_path / "logo.jpg"
    Image.new("RGB", (30, 30), (0, 37, 85)).save(path, "JPEG")
    return path


@pytest.fixture
def png_bytes(png_file: Path) -> bytes:
    return png_file.read_bytes()
