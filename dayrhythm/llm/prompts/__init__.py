"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes show up
clearly in version control.
"""
from dayrhythm.llm.prompts.insight_prompts import (
    DAY_INSIGHTS_SYSTEM_PROMPT,
    TASK_INSIGHT_SYSTEM_PROMPT,
    get_day_insights_user_prompt,
    get_task_insight_user_prompt,
)
from dayrhythm.llm.prompts.schedule_prompts import (
    DEFAULT_IMAGE_REQUEST,
    DEFAULT_IMAGES_REQUEST,
    get_image_schedule_prompt,
    get_text_schedule_system_prompt,
    get_text_schedule_user_prompt,
)

__all__ = [
    "DAY_INSIGHTS_SYSTEM_PROMPT",
    "TASK_INSIGHT_SYSTEM_PROMPT",
    "get_day_insights_user_prompt",
    "get_task_insight_user_prompt",
    "DEFAULT_IMAGE_REQUEST",
    "DEFAULT_IMAGES_REQUEST",
    "get_image_schedule_prompt",
    "get_text_schedule_system_prompt",
    "get_text_schedule_user_prompt",
]
