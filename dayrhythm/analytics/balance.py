"""
Balance Scorer - Work/life balance from a day's events.

Uses its own category rules (BroadCategory), separate from the task-type
rules in energy.py: "meeting" counts as work here but as meetings there,
and the two outputs feed different computations.

The score is an L1 distance from fixed target percentages:

    score = max(0, 100 - (|work% - 60| + |personal% - 25| + |health% - 15|))

`other` has no target and does not count toward the deviation.
"""
from typing import Dict, Optional, Sequence, Tuple

from dayrhythm.analytics.energy import normalize_category
from dayrhythm.analytics.rounding import round_half_up_int
from dayrhythm.models.ai import BroadCategory, WorkLifeBalance
from dayrhythm.models.events import EventRecord

# Checked in order, first match wins
BROAD_CATEGORY_RULES: Tuple[Tuple[BroadCategory, Tuple[str, ...]], ...] = (
    (BroadCategory.WORK, ("work", "meeting", "coding")),
    (BroadCategory.HEALTH, ("health", "exercise", "fitness")),
    (BroadCategory.PERSONAL, ("personal", "family", "social")),
)

TARGET_PERCENTAGES: Dict[BroadCategory, float] = {
    BroadCategory.WORK: 60,
    BroadCategory.PERSONAL: 25,
    BroadCategory.HEALTH: 15,
}


def classify_broad_category(category: Optional[str]) -> BroadCategory:
    """Map a free-text category to a BroadCategory by substring match."""
    normalized = normalize_category(category)
    for broad, keywords in BROAD_CATEGORY_RULES:
        if any(keyword in normalized for keyword in keywords):
            return broad
    return BroadCategory.OTHER


def category_totals(events: Sequence[EventRecord]) -> Dict[BroadCategory, float]:
    """Sum event durations (hours) per BroadCategory; every bucket present."""
    totals = {broad: 0.0 for broad in BroadCategory}
    for event in events:
        totals[classify_broad_category(event.category)] += event.duration
    return totals


def balance_score(totals: Dict[BroadCategory, float], total_hours: float) -> int:
    """0-100 score; 0 when there are no hours to compare."""
    if total_hours == 0:
        return 0

    deviation = sum(
        abs(totals.get(broad, 0.0) / total_hours * 100 - target)
        for broad, target in TARGET_PERCENTAGES.items()
    )
    return round_half_up_int(max(0.0, 100 - deviation))


def score_work_life_balance(events: Sequence[EventRecord]) -> WorkLifeBalance:
    """
    Aggregate events into a WorkLifeBalance.

    Example:
        >>> balance = score_work_life_balance([coding_9_to_11])
        >>> balance.work_percentage, balance.balance_score
        (100, 20)
    """
    totals = category_totals(events)
    total_hours = sum(totals.values())

    def percentage(broad: BroadCategory) -> int:
        # a negative total (overnight events) reports 0%, but still gets scored
        if total_hours <= 0:
            return 0
        return round_half_up_int(totals[broad] / total_hours * 100)

    return WorkLifeBalance(
        work=totals[BroadCategory.WORK],
        personal=totals[BroadCategory.PERSONAL],
        health=totals[BroadCategory.HEALTH],
        other=totals[BroadCategory.OTHER],
        work_percentage=percentage(BroadCategory.WORK),
        personal_percentage=percentage(BroadCategory.PERSONAL),
        health_percentage=percentage(BroadCategory.HEALTH),
        other_percentage=percentage(BroadCategory.OTHER),
        balance_score=balance_score(totals, total_hours),
    )
