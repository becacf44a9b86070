from __future__ import annotations

from pathlib import Path

import pytest

from borderizer import cli
from borderizer.models.config_model import OUTPUT_IN_PLACE, OUTPUT_SUBFOLDER
from borderizer.models.errors import ConfigError


def test_single_positional_means_defaults(tmp_path: Path) -> None:
    config, folder, using_defaults, verbose = cli.resolve_args([str(tmp_path)])

    assert folder == str(tmp_path)
    assert using_defaults
    assert not verbose
    assert config.target_width == 1080
    assert config.output_mode == OUTPUT_SUBFOLDER


def test_flags_override_only_given_fields() -> None:
    config, folder, using_defaults, verbose = cli.resolve_args(
        ["-i", "photos", "--width", "800", "--portrait-horiz", "0.1", "--in-place", "--prefix", "p_"]
    )

    assert folder == "photos"
    assert not using_defaults
    assert config.target_width == 800
    assert config.target_height == 1080
    assert config.portrait_horiz_ratio == 0.1
    assert config.landscape_vert_ratio == 0.05
    assert config.output_mode == OUTPUT_IN_PLACE
    assert config.output_prefix == "p_"


def test_missing_input_is_config_error() -> None:
    with pytest.raises(ConfigError):
        cli.resolve_args(["--width", "100"])


def test_out_of_range_ratio_is_config_error() -> None:
    with pytest.raises(ConfigError):
        cli.resolve_args(["photos", "--landscape-vert", "0.6"])


def test_main_reports_summary(image_folder: Path, capsys) -> None:
    code = cli.main([str(image_folder), "--width", "60", "--height", "50"])

    out = capsys.readouterr().out
    assert code == cli.EXIT_OK
    assert "=== Configuration ===" in out
    assert "Target dimensions: 60x50" in out
    assert "✅ Total images processed: 3" in out
    assert "Fastest image:" in out
    assert (image_folder / "bordered_images" / "bordered_square.jpeg").is_file()


def test_main_without_successes_omits_extremes(tmp_path: Path, capsys) -> None:
    (tmp_path / "bad.png").write_bytes(b"nope")

    code = cli.main([str(tmp_path)])

    captured = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert "❌ Failed images: 1" in captured.out
    assert "Average processing time" not in captured.out
    assert "bad.png" in captured.err
    assert "DecodeError" in captured.err


def test_main_missing_folder_is_fatal(tmp_path: Path, capsys) -> None:
    code = cli.main([str(tmp_path / "absent")])

    assert code == cli.EXIT_FATAL
    assert "Error:" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--input=-v"], ["--", "-v"]])
def test_folder_named_like_flag_is_not_verbose(argv) -> None:
    _config, folder, _defaults, verbose = cli.resolve_args(argv)

    assert folder == "-v"
    assert not verbose


def test_verbose_flag_is_parsed(tmp_path: Path) -> None:
    *_rest, verbose = cli.resolve_args([str(tmp_path), "--verbose"])

    assert verbose


def test_main_configures_logging_from_parsed_flag(tmp_path: Path, monkeypatch) -> None:
    seen = []
    monkeypatch.setattr(cli, "_configure_logging", seen.append)

    cli.main(["--input=-v"])
    cli.main([str(tmp_path), "-v"])

    assert seen == [False, True]
