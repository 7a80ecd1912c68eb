"""
Shared pytest fixtures for the autofocus test suite.

- override_settings: isolates Settings from the developer's environment
- checkerboard: builds a high-contrast checkerboard frame
- make_frame: writes a synthetic BGR image (checkerboard by default) into
  a temporary frames directory
"""

from pathlib import Path

import cv2
import numpy as np
import pytest


# ---------------------------------------------------------------------------
# Settings fixture: clears env overrides for tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def override_settings(monkeypatch, tmp_path):
    """Make Settings() use defaults regardless of env vars or a local .env."""
    monkeypatch.delenv("FRAME_NUMBER_DIGITS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    # A .env in the working directory would otherwise leak into Settings
    monkeypatch.chdir(tmp_path)
    # Clear lru_cache so each test gets fresh Settings from monkeypatched env
    from autofocus.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Synthetic frames
# ---------------------------------------------------------------------------


def _checkerboard(h: int = 128, w: int = 128, square: int = 16) -> np.ndarray:
    """Return a high-contrast checkerboard with ``square``-pixel cells.

    Cells must be wider than one pixel: a 1-pixel checkerboard is averaged
    away entirely by the 3×3 Gaussian pre-blur.
    """
    rows = np.arange(h) // square
    cols = np.arange(w) // square
    mask = (rows[:, None] + cols[None, :]) % 2 == 0
    frame = np.zeros((h, w, 3), dtype=np.uint8)
    frame[mask] = 255
    return frame


@pytest.fixture()
def checkerboard():
    """The checkerboard builder, for tests that need custom sizes."""
    return _checkerboard


@pytest.fixture()
def frames_dir(tmp_path) -> Path:
    path = tmp_path / "frames"
    path.mkdir()
    return path


@pytest.fixture()
def make_frame(frames_dir):
    """Factory writing ``image`` as ``frames_dir/<name>`` and returning its path."""

    def _make(name: str, image: np.ndarray | None = None) -> Path:
        path = frames_dir / name
        ok = cv2.imwrite(str(path), _checkerboard() if image is None else image)
        assert ok, f"cv2.imwrite failed for {path}"
        return path

    return _make
