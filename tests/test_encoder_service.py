from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from borderizer.models.errors import EncodeError
from borderizer.services.encoder_service import FORMAT_JPEG, FORMAT_PNG, EncoderService, format_for


def _canvas() -> Image.Image:
    arr = np.full((32, 48, 4), 255, dtype=np.uint8)
    arr[8:24, 12:36, :3] = (40, 90, 160)
    return Image.fromarray(arr)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.png", FORMAT_PNG),
        ("a.PNG", FORMAT_PNG),
        ("a.jpg", FORMAT_JPEG),
        ("a.JPEG", FORMAT_JPEG),
        ("a.webp", FORMAT_JPEG),
        ("noext", FORMAT_JPEG),
    ],
)
def test_format_for(name: str, expected: str) -> None:
    assert format_for(name) == expected


def test_png_is_lossless(tmp_path: Path) -> None:
    canvas = _canvas()
    out = EncoderService().save(canvas, tmp_path / "out.png", quality=1)

    with Image.open(out) as decoded:
        assert decoded.format == "PNG"
        assert np.array_equal(np.asarray(decoded.convert("RGBA")), np.asarray(canvas))


def test_jpeg_drops_alpha_and_stays_close(tmp_path: Path) -> None:
    canvas = _canvas()
    out = EncoderService().save(canvas, tmp_path / "out.JPG", quality=100)

    with Image.open(out) as decoded:
        assert decoded.format == "JPEG"
        assert decoded.mode == "RGB"
        diff = np.abs(np.asarray(decoded, dtype=np.int16) - np.asarray(canvas, dtype=np.int16)[..., :3])
    # кромки размываются субдискретизацией цвета, поэтому строго только внутри областей
    assert diff.mean() < 6
    assert diff[12:20, 16:32].max() <= 6
    assert diff[:4, :].max() <= 6


def test_write_failure_raises_encode_error(tmp_path: Path) -> None:
    with pytest.raises(EncodeError):
        EncoderService().save(_canvas(), tmp_path / "missing" / "out.png", quality=90)
