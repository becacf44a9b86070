from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image

from borderizer.models.config_model import BorderConfig


def _write_image(
    path: Path,
    size: Tuple[int, int],
    color: Tuple[int, ...] = (200, 30, 30),
    mode: str = "RGB",
) -> Path:
    image = Image.new(mode, size, color)
    fmt = "PNG" if path.suffix.lower() == ".png" else "JPEG"
    image.save(path, format=fmt)
    return path


@pytest.fixture
def make_image():
    return _write_image


@pytest.fixture
def config() -> BorderConfig:
    return BorderConfig()


@pytest.fixture
def small_config() -> BorderConfig:
    # маленький холст: тесты остаются быстрыми
    return BorderConfig(target_width=120, target_height=100)


@pytest.fixture
def image_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "photos"
    folder.mkdir()
    _write_image(folder / "landscape.jpg", (300, 150))
    _write_image(folder / "portrait.PNG", (80, 150), color=(10, 120, 240))
    _write_image(folder / "square.jpeg", (90, 90))
    (folder / "notes.txt").write_text("not an image", encoding="utf-8")
    (folder / "nested").mkdir()
    _write_image(folder / "nested" / "inner.jpg", (40, 40))
    return folder
