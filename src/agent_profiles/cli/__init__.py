"""CLI helpers exposed for other modules."""

from .ui import Choice, Separator, StepTracker, format_display, multi_select_with_arrows

__all__ = ["Choice", "Separator", "StepTracker", "format_display", "multi_select_with_arrows"]
