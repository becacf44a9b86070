from __future__ import annotations

from pathlib import Path

import pytest

from borderizer.models.config_model import OUTPUT_IN_PLACE, BorderConfig
from borderizer.models.errors import ConfigError


def test_defaults() -> None:
    cfg = BorderConfig().validate()

    assert (cfg.target_width, cfg.target_height) == (1080, 1080)
    assert cfg.ratios_for(True) == (0.05, 0.03)
    assert cfg.ratios_for(False) == (0.005, 0.18)
    assert cfg.encode_quality == 100
    assert cfg.separate_folder
    assert cfg.output_prefix == "bordered_"


@pytest.mark.parametrize(
    "overrides",
    [
        {"target_width": 0},
        {"target_height": -5},
        {"landscape_vert_ratio": 0.5},
        {"portrait_horiz_ratio": -0.01},
        {"encode_quality": 0},
        {"encode_quality": 101},
        {"output_mode": "elsewhere"},
    ],
)
def test_invalid_values_rejected(overrides) -> None:
    with pytest.raises(ConfigError):
        BorderConfig(**overrides).validate()


def test_output_folder_policy(tmp_path: Path) -> None:
    assert BorderConfig().resolve_output_folder(tmp_path) == tmp_path / "bordered_images"
    assert BorderConfig(output_mode=OUTPUT_IN_PLACE).resolve_output_folder(tmp_path) == tmp_path
