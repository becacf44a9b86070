"""Командная строка: разбор флагов, запуск пакета, печать отчёта."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, Tuple

from borderizer.controllers.batch_controller import BatchController
from borderizer.models.config_model import OUTPUT_IN_PLACE, OUTPUT_SUBFOLDER, BorderConfig
from borderizer.models.errors import ConfigError, EnumerationError
from borderizer.services.discovery_service import DiscoveryService
from borderizer.ui.console import format_config, format_outcome, format_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 2

# флаг -> поле BorderConfig
_FLAG_FIELDS = {
    "width": "target_width",
    "height": "target_height",
    "landscape_vert": "landscape_vert_ratio",
    "landscape_horiz": "landscape_horiz_ratio",
    "portrait_vert": "portrait_vert_ratio",
    "portrait_horiz": "portrait_horiz_ratio",
    "jpeg_quality": "encode_quality",
    "prefix": "output_prefix",
    "output_mode": "output_mode",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="borderizer",
        description="Add white borders to images in a folder and scale them to a fixed canvas.",
    )
    parser.add_argument("input", nargs="?", help="Input folder containing images")
    parser.add_argument("-i", "--input", dest="input_flag", help="Input folder (alternative to positional)")
    # default=None: в конфиг попадают только явно заданные флаги
    parser.add_argument("--width", type=int, default=None, help="Target width for output images (1080)")
    parser.add_argument("--height", type=int, default=None, help="Target height for output images (1080)")
    parser.add_argument("--landscape-vert", type=float, default=None, help="Vertical border ratio for landscape images (0.05)")
    parser.add_argument("--landscape-horiz", type=float, default=None, help="Horizontal border ratio for landscape images (0.03)")
    parser.add_argument("--portrait-vert", type=float, default=None, help="Vertical border ratio for portrait images (0.005)")
    parser.add_argument("--portrait-horiz", type=float, default=None, help="Horizontal border ratio for portrait images (0.18)")
    parser.add_argument("--jpeg-quality", type=int, default=None, help="JPEG output quality 1-100 (100)")
    parser.add_argument("--prefix", default=None, help="Prefix for output filenames (bordered_)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--separate-folder",
        dest="output_mode",
        action="store_const",
        const=OUTPUT_SUBFOLDER,
        default=None,
        help="Write output into the 'bordered_images' subfolder (default)",
    )
    mode.add_argument(
        "--in-place",
        dest="output_mode",
        action="store_const",
        const=OUTPUT_IN_PLACE,
        help="Write output next to the input files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_args(argv: List[str]) -> Tuple[BorderConfig, str, bool, bool]:
    """Разбирает аргументы в (конфиг, входная папка, значения по умолчанию?, подробный лог?).

    Raises:
        ConfigError: если папка не указана или значения вне допустимых диапазонов.
    """
    args = build_parser().parse_args(argv)
    config, input_folder = config_from_args(args)
    return config, input_folder, _using_defaults(argv), args.verbose


def _using_defaults(argv: List[str]) -> bool:
    return len(argv) == 1 and not argv[0].startswith("-")


def config_from_args(args: argparse.Namespace) -> Tuple[BorderConfig, str]:
    input_folder = args.input or args.input_flag
    if not input_folder:
        raise ConfigError("Input folder is required (pass as argument or use -i/--input)")

    overrides = {
        field_name: getattr(args, flag)
        for flag, field_name in _FLAG_FIELDS.items()
        if getattr(args, flag) is not None
    }
    config = dataclasses.replace(BorderConfig(), **overrides).validate()
    return config, input_folder


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config, input_folder = config_from_args(args)
        print("\n".join(format_config(config, _using_defaults(argv))))
        tasks = DiscoveryService().build_tasks(input_folder, config)
    except (ConfigError, EnumerationError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    def _print_outcome(outcome) -> None:
        stream = sys.stdout if outcome.succeeded else sys.stderr
        print(format_outcome(outcome), file=stream)

    controller = BatchController(config=config, on_outcome=_print_outcome)
    report = controller.run(tasks)
    print("\n".join(format_summary(report)))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
