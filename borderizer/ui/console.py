"""Текстовое представление конфигурации, исходов и сводки.

Принципы:
- SRP: только форматирование строк; печать делает вызывающий код.
- Функции чистые, поэтому одинаково используются CLI и GUI.
"""
from __future__ import annotations

from typing import List

from borderizer.models.batch_model import BatchReport, Outcome
from borderizer.models.config_model import BorderConfig


def format_config(config: BorderConfig, using_defaults: bool = False) -> List[str]:
    lines = ["", "=== Configuration ==="]
    if using_defaults:
        lines.append("Using default configuration (no flags provided)")
    lines.extend(
        [
            f"Target dimensions: {config.target_width}x{config.target_height}",
            "Landscape borders: Vertical={:.1f}%, Horizontal={:.1f}%".format(
                config.landscape_vert_ratio * 100, config.landscape_horiz_ratio * 100
            ),
            "Portrait borders: Vertical={:.1f}%, Horizontal={:.1f}%".format(
                config.portrait_vert_ratio * 100, config.portrait_horiz_ratio * 100
            ),
            f"JPEG quality: {config.encode_quality}",
            f"Output prefix: {config.output_prefix}",
            f"Separate output folder: {config.separate_folder}",
            "==================",
            "",
        ]
    )
    return lines


def format_outcome(outcome: Outcome) -> str:
    if outcome.succeeded:
        return f"✅ Successfully processed {outcome.name} in {outcome.duration:.2f} seconds"
    return f"❌ Error processing {outcome.name}: [{outcome.error_kind}] {outcome.message}"


def format_summary(report: BatchReport) -> List[str]:
    """Итоговый блок; среднее, самый быстрый и медленный файл выводятся только при успехах."""
    s = report.summary
    lines = [
        "",
        f"Total execution time: {report.wall_time:.2f} seconds",
        "",
        "📊 === Processing Summary ===",
        f"✅ Total images processed: {s.succeeded}",
        f"❌ Failed images: {s.failed}",
    ]
    if s.average is not None and s.fastest and s.slowest:
        lines.append(f"⏱️  Average processing time: {s.average:.2f} seconds")
        lines.append(f"🚀 Fastest image: {s.fastest[0]} ({s.fastest[1]:.2f} seconds)")
        lines.append(f"🐢 Slowest image: {s.slowest[0]} ({s.slowest[1]:.2f} seconds)")
    return lines
