"""Prompts for turning text or timetable images into event JSON."""

EVENT_JSON_EXAMPLE = """[{
  "title": "Event title",
  "description": "Brief description",
  "startTime": 15.0,
  "endTime": 16.0,
  "date": "2025-10-25",
  "emoji": "📅",
  "colorHex": "#FF69B4"
}]"""

DEFAULT_IMAGE_REQUEST = (
    "Analyze this timetable/schedule image and extract all events, tasks, "
    "and time slots into a structured format."
)

DEFAULT_IMAGES_REQUEST = (
    "Analyze these timetable/schedule images and extract all events, tasks, "
    "and time slots into a structured format."
)


def get_text_schedule_system_prompt(today: str) -> str:
    """System prompt for natural-language schedule parsing."""
    return f"""You are a scheduling assistant. Today's date is {today}.

Return ONLY a JSON array of event objects:
{EVENT_JSON_EXAMPLE}

Rules:
- startTime/endTime in 24-hour decimal format (15.0 = 3pm, 15.5 = 3:30pm)
- date in YYYY-MM-DD format
- Choose relevant emojis and colors
- If duration not specified, default to 30 minutes
- Infer smart defaults from context"""


def get_text_schedule_user_prompt(prompt: str) -> str:
    return f'Parse this into structured events: "{prompt}"'


def get_image_schedule_prompt(today: str, image_count: int, user_request: str) -> str:
    """Full Gemini Vision prompt for one or more timetable images."""
    if image_count > 1:
        scope = (
            f"Analyze ALL {image_count} image(s) carefully and extract all events, classes, "
            "meetings, or tasks visible across all images. Combine them into a single "
            "comprehensive schedule."
        )
        extra_rules = (
            "- Extract ALL events visible across ALL images\n"
            "- If images show different days/weeks, include events for those specific dates\n"
            "- Avoid duplicates - if the same event appears in multiple images, include it only once"
        )
    else:
        scope = (
            "Analyze the image carefully and extract all events, classes, meetings, "
            "or tasks visible in the image."
        )
        extra_rules = (
            "- Extract ALL events visible in the image\n"
            "- If the image shows a weekly schedule, include events for multiple days"
        )

    return f"""You are a scheduling assistant that analyzes images of timetables, calendars, and schedules. Today's date is {today}.

{scope}

Return ONLY a JSON array of event objects:
{EVENT_JSON_EXAMPLE}

Rules:
- startTime/endTime in 24-hour decimal format (15.0 = 3pm, 15.5 = 3:30pm)
- date in YYYY-MM-DD format (use today's date if not specified)
- Choose relevant emojis based on the event type
- Choose appropriate colors for each event
- If duration not specified, infer reasonable duration
{extra_rules}

User request: {user_request}"""
