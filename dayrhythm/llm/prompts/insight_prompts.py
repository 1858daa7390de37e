# Productivity insight prompts

import json
from typing import Any, Dict, List

DAY_INSIGHTS_SYSTEM_PROMPT = (
    "You are a productivity assistant analyzing daily schedules. Provide exactly 5 "
    "actionable insights about time management, work-life balance, and productivity. "
    "Return ONLY a JSON array of 5 strings, no other text."
)

TASK_INSIGHT_SYSTEM_PROMPT = """You are a productivity insights assistant. Provide EXACTLY 2 concise, actionable bullet points.

Rules:
- Return ONLY 2 bullet points, each starting with "• "
- Each point must be ONE sentence (max 15 words)
- Focus on: timing, duration, or one specific tip
- Be direct and actionable
- No fluff, no explanations

Example format:
• Schedule 15min break after for recovery
• Morning hours boost focus 40% for this task type"""


def get_day_insights_user_prompt(events: List[Dict[str, Any]]) -> str:
    schedule = json.dumps(events, indent=2, ensure_ascii=False)
    return (
        f"Analyze this day schedule and provide 5 productivity insights:\n\n{schedule}\n\n"
        'Return format: ["insight 1", "insight 2", "insight 3", "insight 4", "insight 5"]'
    )


def get_task_insight_user_prompt(title: str, duration: str, time: str, category: str) -> str:
    return (
        f"Task: {title} | Duration: {duration} | Time: {time} | Category: {category}\n\n"
        "Give 2 bullet points about optimal timing or effectiveness."
    )
