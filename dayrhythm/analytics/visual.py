"""Combine the three heuristics into the visualInsights payload."""
from typing import Sequence

from dayrhythm.analytics.balance import score_work_life_balance
from dayrhythm.analytics.energy import build_energy_heatmap
from dayrhythm.analytics.focus import build_focus_blocks
from dayrhythm.models.ai import VisualInsights
from dayrhythm.models.events import EventRecord


def calculate_visual_insights(events: Sequence[EventRecord]) -> VisualInsights:
    return VisualInsights(
        energy_heatmap=build_energy_heatmap(events),
        focus_blocks=build_focus_blocks(events),
        work_life_balance=score_work_life_balance(events),
    )
