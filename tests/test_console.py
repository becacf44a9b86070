from __future__ import annotations

from borderizer.models.batch_model import BatchReport, Outcome, Summary
from borderizer.models.config_model import BorderConfig
from borderizer.ui.console import format_config, format_outcome, format_summary


def test_format_config_percentages() -> None:
    lines = format_config(BorderConfig(), using_defaults=True)

    assert "Using default configuration (no flags provided)" in lines
    assert "Landscape borders: Vertical=5.0%, Horizontal=3.0%" in lines
    assert "Portrait borders: Vertical=0.5%, Horizontal=18.0%" in lines


def test_format_outcome() -> None:
    assert format_outcome(Outcome.ok("a.jpg", 1.234)) == "✅ Successfully processed a.jpg in 1.23 seconds"
    failed = format_outcome(Outcome.failed("b.jpg", 0.0, "DecodeError", "broken"))
    assert failed == "❌ Error processing b.jpg: [DecodeError] broken"


def test_format_summary_with_successes() -> None:
    summary = Summary()
    summary.add(Outcome.ok("a.jpg", 1.0))
    summary.add(Outcome.ok("b.jpg", 3.0))
    lines = format_summary(BatchReport(summary=summary, wall_time=4.5))

    assert "Total execution time: 4.50 seconds" in lines
    assert "⏱️  Average processing time: 2.00 seconds" in lines
    assert "🚀 Fastest image: a.jpg (1.00 seconds)" in lines
    assert "🐢 Slowest image: b.jpg (3.00 seconds)" in lines
