"""
Focus-Block Segmenter - Rate each event as a span of attention.

Events are sorted by start time (stable, so ties keep input order) and
rated by their own duration and by the gap before the next event.
Adjacent events are never merged.
"""
from typing import List, Sequence

from dayrhythm.models.ai import FocusBlock, FocusQuality
from dayrhythm.models.events import EventRecord

# Hours
MIN_BREAK_GAP = 0.25
EXCELLENT_MIN_DURATION = 1.5
GOOD_MIN_DURATION = 0.5


def rate_focus_quality(duration: float) -> FocusQuality:
    """Thresholds are inclusive: 1.5 is excellent, 0.5 is good."""
    if duration >= EXCELLENT_MIN_DURATION:
        return FocusQuality.EXCELLENT
    if duration >= GOOD_MIN_DURATION:
        return FocusQuality.GOOD
    return FocusQuality.FRAGMENTED


def build_focus_blocks(events: Sequence[EventRecord]) -> List[FocusBlock]:
    """
    Build one FocusBlock per event in ascending start-time order.

    hasBreakAfter is True for the last event, otherwise when the next
    event starts at least 15 minutes after this one ends.
    """
    ordered = sorted(events, key=lambda event: event.start_time)
    blocks = []

    for index, event in enumerate(ordered):
        duration = event.duration
        if index + 1 < len(ordered):
            gap = ordered[index + 1].start_time - event.end_time
            has_break_after = gap >= MIN_BREAK_GAP
        else:
            has_break_after = True

        blocks.append(
            FocusBlock(
                title=event.title,
                start_time=event.start_time,
                duration=duration,
                quality=rate_focus_quality(duration),
                has_break_after=has_break_after,
                category=event.category,
            )
        )

    return blocks
