"""
Schedule Service - Turn text or timetable images into events.

Four entry points share one output shape (a list of event dicts):
- parse_text:       Groq, from a natural-language prompt
- parse_text_pro:   Gemini text model, same prompt
- parse_image:      Gemini Vision, one image
- parse_images:     Gemini Vision, up to three images in one call

Parsed events are returned as the model produced them; they are not
stored. A reply that is not a JSON array of objects is a 500.
"""
import base64
import binascii
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from dayrhythm.core.config import Settings
from dayrhythm.core.exceptions import ProviderNotConfiguredError, ValidationError
from dayrhythm.core.logging_config import get_logger
from dayrhythm.llm.client import LLMClient
from dayrhythm.llm.parsing import parse_event_list
from dayrhythm.llm.prompts import (
    DEFAULT_IMAGE_REQUEST,
    DEFAULT_IMAGES_REQUEST,
    get_image_schedule_prompt,
    get_text_schedule_system_prompt,
    get_text_schedule_user_prompt,
)

logger = get_logger(__name__)

DATA_URL_PREFIX = re.compile(r"^data:image/[a-z]+;base64,")

PRO_NOT_CONFIGURED = (
    "Gemini Pro API is not configured. Please add GEMINI_API_KEY to your environment variables."
)
VISION_NOT_CONFIGURED = (
    "Gemini API is required for image processing. Please add GEMINI_API_KEY to your environment variables."
)
IMAGE_PARSE_FAILED = (
    "Failed to parse AI response. The image might not contain a clear schedule or timetable."
)
IMAGES_PARSE_FAILED = (
    "Failed to parse AI response. The images might not contain clear schedules or timetables."
)


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def decode_image(image: str) -> bytes:
    """
    Decode a base64 image, with or without a data-URL prefix.

    Raises:
        ValidationError: If the payload is not valid base64
    """
    payload = DATA_URL_PREFIX.sub("", image.strip())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Image must be a base64 encoded string", field="image") from e


class ScheduleService:
    """Schedule parsing across Groq and Gemini."""

    def __init__(self, llm: LLMClient, settings: Settings):
        self.llm = llm
        self.settings = settings

    async def parse_text(self, prompt: str) -> List[Dict[str, Any]]:
        logger.info(f"Parsing schedule with Groq: prompt_length={len(prompt)}")
        content = await self.llm.complete(
            system_prompt=get_text_schedule_system_prompt(today_iso()),
            user_message=get_text_schedule_user_prompt(prompt),
            temperature=0.3,
            max_tokens=1000,
        )
        return parse_event_list(content or "[]")

    async def parse_text_pro(self, prompt: str) -> List[Dict[str, Any]]:
        if not self.llm.gemini_configured:
            raise ProviderNotConfiguredError(PRO_NOT_CONFIGURED)

        logger.info(f"Parsing schedule with Gemini: prompt_length={len(prompt)}")
        full_prompt = (
            f"{get_text_schedule_system_prompt(today_iso())}\n\n"
            f"{get_text_schedule_user_prompt(prompt)}"
        )
        content = await self.llm.generate_gemini(full_prompt, model=self.settings.gemini_text_model)
        return parse_event_list(content)

    async def parse_image(self, image: str, prompt: Optional[str] = None) -> List[Dict[str, Any]]:
        if not self.llm.gemini_configured:
            raise ProviderNotConfiguredError(VISION_NOT_CONFIGURED)

        events = await self._parse_vision(
            [decode_image(image)], prompt or DEFAULT_IMAGE_REQUEST, IMAGE_PARSE_FAILED
        )
        logger.info(f"Extracted {len(events)} events from image")
        return events

    async def parse_images(
        self, images: Sequence[str], prompt: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        if not self.llm.gemini_configured:
            raise ProviderNotConfiguredError(VISION_NOT_CONFIGURED)

        decoded = [decode_image(image) for image in images]
        events = await self._parse_vision(
            decoded, prompt or DEFAULT_IMAGES_REQUEST, IMAGES_PARSE_FAILED
        )
        logger.info(f"Extracted {len(events)} events from {len(images)} images")
        return events

    async def _parse_vision(
        self, images: List[bytes], user_request: str, failure_message: str
    ) -> List[Dict[str, Any]]:
        full_prompt = get_image_schedule_prompt(today_iso(), len(images), user_request)
        content = await self.llm.generate_gemini(
            full_prompt, model=self.settings.gemini_vision_model, images=images
        )
        return parse_event_list(content, error_message=failure_message)
