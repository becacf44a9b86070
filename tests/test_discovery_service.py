from __future__ import annotations

from pathlib import Path

import pytest

from borderizer.models.config_model import OUTPUT_IN_PLACE, BorderConfig
from borderizer.models.errors import ConfigError
from borderizer.services.discovery_service import DiscoveryService


def test_lists_only_image_files(image_folder: Path) -> None:
    names = [p.name for p in DiscoveryService().list_candidates(image_folder)]

    assert names == ["landscape.jpg", "portrait.PNG", "square.jpeg"]


def test_missing_folder_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        DiscoveryService().list_candidates(tmp_path / "absent")


def test_file_instead_of_folder_is_config_error(tmp_path: Path) -> None:
    path = tmp_path / "file.jpg"
    path.write_bytes(b"")
    with pytest.raises(ConfigError):
        DiscoveryService().list_candidates(path)


def test_build_tasks_in_subfolder(image_folder: Path) -> None:
    tasks = DiscoveryService().build_tasks(image_folder, BorderConfig())

    out = image_folder / "bordered_images"
    assert out.is_dir()
    assert [t.output_path for t in tasks] == [
        out / "bordered_landscape.jpg",
        out / "bordered_portrait.PNG",
        out / "bordered_square.jpeg",
    ]


def test_build_tasks_in_place(image_folder: Path) -> None:
    cfg = BorderConfig(output_mode=OUTPUT_IN_PLACE, output_prefix="x_")
    tasks = DiscoveryService().build_tasks(image_folder, cfg)

    assert not (image_folder / "bordered_images").exists()
    assert tasks[0].output_path == image_folder / "x_landscape.jpg"
    assert tasks[0].name == "landscape.jpg"
