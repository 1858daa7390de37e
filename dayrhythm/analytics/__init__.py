"""
Analytics Package - Deterministic schedule heuristics.

This package provides:
- energy:  time-of-day energy, task type and alignment per event
- focus:   focus blocks rated by duration and following break
- balance: work/life balance percentages and score
- visual:  all three combined for the insights endpoint

Example:
    >>> from dayrhythm.analytics import calculate_visual_insights
    >>> insights = calculate_visual_insights(events)
    >>> insights.work_life_balance.balance_score
    20
"""
from dayrhythm.analytics.balance import classify_broad_category, score_work_life_balance
from dayrhythm.analytics.energy import (
    build_energy_heatmap,
    classify_alignment,
    classify_energy,
    classify_task_type,
)
from dayrhythm.analytics.focus import build_focus_blocks, rate_focus_quality
from dayrhythm.analytics.visual import calculate_visual_insights

__all__ = [
    "build_energy_heatmap",
    "build_focus_blocks",
    "calculate_visual_insights",
    "classify_alignment",
    "classify_broad_category",
    "classify_energy",
    "classify_task_type",
    "rate_focus_quality",
    "score_work_life_balance",
]
