import pytest

from dayrhythm.analytics.energy import (
    build_energy_heatmap,
    classify_alignment,
    classify_energy,
    classify_task_type,
)
from dayrhythm.models.ai import Alignment, EnergyLevel, TaskType


@pytest.mark.parametrize("hour", [9, 9.5, 11.99])
def test_morning_peak_is_high_energy(hour):
    assert classify_energy(hour) == EnergyLevel.HIGH


@pytest.mark.parametrize("hour", [6, 8.75, 16, 18.5])
def test_shoulder_hours_are_medium_energy(hour):
    assert classify_energy(hour) == EnergyLevel.MEDIUM


@pytest.mark.parametrize("hour", [0, 5.99, 12, 13.5, 15.99, 19, 23.5])
def test_other_hours_are_low_energy(hour):
    assert classify_energy(hour) == EnergyLevel.LOW


@pytest.mark.parametrize("category", ["coding", "CODING", "Coding"])
def test_coding_is_deep_work_regardless_of_case(category):
    assert classify_task_type(category) == TaskType.DEEP_WORK


@pytest.mark.parametrize(
    "category,expected",
    [
        ("Deep focus", TaskType.DEEP_WORK),
        ("Team Meeting", TaskType.MEETINGS),
        ("phone call", TaskType.MEETINGS),
        ("Email", TaskType.ADMIN),
        ("admin tasks", TaskType.ADMIN),
        ("Design review", TaskType.CREATIVE),
        ("creative writing", TaskType.CREATIVE),
        ("Gym", TaskType.OTHER),
        (None, TaskType.OTHER),
        ("", TaskType.OTHER),
    ],
)
def test_task_type_rules(category, expected):
    assert classify_task_type(category) == expected


def test_task_type_first_rule_wins():
    # "work" is checked before "meeting"
    assert classify_task_type("work meeting") == TaskType.DEEP_WORK


@pytest.mark.parametrize(
    "task_type,energy,expected",
    [
        (TaskType.DEEP_WORK, EnergyLevel.HIGH, Alignment.OPTIMAL),
        (TaskType.DEEP_WORK, EnergyLevel.LOW, Alignment.POOR),
        (TaskType.DEEP_WORK, EnergyLevel.MEDIUM, Alignment.GOOD),
        (TaskType.MEETINGS, EnergyLevel.LOW, Alignment.POOR),
        (TaskType.MEETINGS, EnergyLevel.HIGH, Alignment.GOOD),
        (TaskType.ADMIN, EnergyLevel.HIGH, Alignment.POOR),
        (TaskType.ADMIN, EnergyLevel.LOW, Alignment.GOOD),
        (TaskType.CREATIVE, EnergyLevel.HIGH, Alignment.GOOD),
        (TaskType.OTHER, EnergyLevel.LOW, Alignment.GOOD),
    ],
)
def test_alignment_table(task_type, energy, expected):
    assert classify_alignment(task_type, energy) == expected


def test_heatmap_keeps_input_order_and_original_category(make_event):
    events = [
        make_event("Late emails", 20, 21, "Email"),
        make_event("Build feature", 9, 11, "Coding"),
    ]

    heatmap = build_energy_heatmap(events)

    assert [entry.title for entry in heatmap] == ["Late emails", "Build feature"]
    assert heatmap[1].optimal_energy == EnergyLevel.HIGH
    assert heatmap[1].actual_task_type == TaskType.DEEP_WORK
    assert heatmap[1].alignment == Alignment.OPTIMAL
    assert heatmap[1].category == "Coding"
    assert heatmap[0].end_time == 21


def test_heatmap_serializes_camel_case(make_event):
    entry = build_energy_heatmap([make_event("Standup", 9, 9.25, "meeting")])[0]

    assert entry.model_dump(by_alias=True, mode="json") == {
        "title": "Standup",
        "startTime": 9,
        "endTime": 9.25,
        "optimalEnergy": "high",
        "actualTaskType": "meetings",
        "alignment": "good",
        "category": "meeting",
    }


def test_empty_input_gives_empty_heatmap():
    assert build_energy_heatmap([]) == []
