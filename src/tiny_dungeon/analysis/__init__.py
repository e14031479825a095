"""Layout analysis: topology metrics and reports."""

from tiny_dungeon.analysis.metrics import compute_batch_metrics, compute_layout_metrics
from tiny_dungeon.analysis.models import BatchMetrics, LayoutMetrics
from tiny_dungeon.analysis.report import generate_batch_report, generate_layout_report

__all__ = [
    "BatchMetrics",
    "LayoutMetrics",
    "compute_batch_metrics",
    "compute_layout_metrics",
    "generate_batch_report",
    "generate_layout_report",
]
