"""
Energy Classifier - Label events by time-of-day energy and task type.

Each event gets:
- optimalEnergy: typical energy for the hour it starts in
- actualTaskType: what kind of work its category suggests
- alignment: whether that kind of work suits that energy level

All functions are pure; they never look at anything but their input.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from dayrhythm.models.ai import Alignment, EnergyHeatmapEntry, EnergyLevel, TaskType
from dayrhythm.models.events import EventRecord

DEFAULT_CATEGORY = "other"

# Start-hour windows, half open [start, end)
HIGH_ENERGY_HOURS: Tuple[Tuple[float, float], ...] = ((9, 12),)
MEDIUM_ENERGY_HOURS: Tuple[Tuple[float, float], ...] = ((6, 9), (16, 19))

# Checked in order, first match wins
TASK_TYPE_RULES: Tuple[Tuple[TaskType, Tuple[str, ...]], ...] = (
    (TaskType.DEEP_WORK, ("work", "coding", "deep")),
    (TaskType.MEETINGS, ("meeting", "call")),
    (TaskType.ADMIN, ("email", "admin")),
    (TaskType.CREATIVE, ("design", "creative")),
)


def normalize_category(category: Optional[str]) -> str:
    """Lower-case a category, defaulting missing/empty ones to 'other'."""
    return category.lower() if category else DEFAULT_CATEGORY


def _in_windows(hour: float, windows: Iterable[Tuple[float, float]]) -> bool:
    return any(start <= hour < end for start, end in windows)


def classify_energy(start_time: float) -> EnergyLevel:
    """
    Energy level for an event starting at `start_time` (decimal hours).

    Example:
        >>> classify_energy(9.5)
        <EnergyLevel.HIGH: 'high'>
    """
    if _in_windows(start_time, HIGH_ENERGY_HOURS):
        return EnergyLevel.HIGH
    if _in_windows(start_time, MEDIUM_ENERGY_HOURS):
        return EnergyLevel.MEDIUM
    return EnergyLevel.LOW


def classify_task_type(category: Optional[str]) -> TaskType:
    """Map a free-text category to a TaskType by substring match."""
    normalized = normalize_category(category)
    for task_type, keywords in TASK_TYPE_RULES:
        if any(keyword in normalized for keyword in keywords):
            return task_type
    return TaskType.OTHER


def classify_alignment(task_type: TaskType, energy: EnergyLevel) -> Alignment:
    """Decision table, first match wins."""
    if task_type == TaskType.DEEP_WORK and energy == EnergyLevel.HIGH:
        return Alignment.OPTIMAL
    if task_type == TaskType.DEEP_WORK and energy == EnergyLevel.LOW:
        return Alignment.POOR
    if task_type == TaskType.MEETINGS and energy == EnergyLevel.LOW:
        return Alignment.POOR
    if energy == EnergyLevel.HIGH and task_type == TaskType.ADMIN:
        return Alignment.POOR
    return Alignment.GOOD


def build_energy_heatmap(events: Sequence[EventRecord]) -> List[EnergyHeatmapEntry]:
    """One heatmap entry per event, in input order."""
    heatmap = []
    for event in events:
        energy = classify_energy(event.start_time)
        task_type = classify_task_type(event.category)
        heatmap.append(
            EnergyHeatmapEntry(
                title=event.title,
                start_time=event.start_time,
                end_time=event.end_time,
                optimal_energy=energy,
                actual_task_type=task_type,
                alignment=classify_alignment(task_type, energy),
                category=event.category,
            )
        )
    return heatmap
