"""
LLM Client for Groq and Google Gemini.

This module provides one interface to both providers:
- Groq (LLaMA-3.3-70B) for insights, task tips and schedule parsing
- Gemini for the "pro" parser and for timetable images

Each call is a single attempt. A provider error is logged and raised
as LLMError; callers decide whether to fall back to canned content.
"""
from typing import List, Optional, Sequence

import google.generativeai as genai
from groq import AsyncGroq

from dayrhythm.core.config import Settings
from dayrhythm.core.exceptions import LLMError
from dayrhythm.core.logging_config import get_logger

logger = get_logger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"


class LLMClient:
    """
    Async client for Groq chat completions and Gemini generation.

    Example:
        >>> client = LLMClient(settings)
        >>> text = await client.complete(
        ...     system_prompt="Return a JSON array.",
        ...     user_message="Plan my morning",
        ... )
    """

    def __init__(self, settings: Settings):
        """Initialize clients for both providers."""
        self.settings = settings
        self.groq_client = AsyncGroq(api_key=settings.groq_api_key)
        self.default_model = settings.groq_model

        if settings.gemini_configured:
            genai.configure(api_key=settings.gemini_api_key)
            logger.info("LLM Client initialized (Groq + Gemini)")
        else:
            logger.warning("GEMINI_API_KEY not set; pro and vision parsing disabled")

    @property
    def gemini_configured(self) -> bool:
        return self.settings.gemini_configured

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        temperature: float = 0.7,
        max_tokens: int = 500,
        model: Optional[str] = None,
    ) -> str:
        """
        Run one Groq chat completion.

        Returns:
            The message content, or "" when the model returned none

        Raises:
            LLMError: If the Groq API call fails
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]
        target_model = model or self.default_model

        try:
            response = await self.groq_client.chat.completions.create(
                model=target_model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            error_msg = str(e).lower()
            is_rate_limit = "429" in error_msg or "rate limit" in error_msg
            log_fn = logger.warning if is_rate_limit else logger.error
            log_fn(f"Groq request failed ({target_model}): {e}")
            raise LLMError(f"Groq request failed: {e}") from e

        return response.choices[0].message.content or ""

    async def generate_gemini(
        self,
        prompt: str,
        model: str,
        images: Optional[Sequence[bytes]] = None,
    ) -> str:
        """
        Run one Gemini generation, optionally with images.

        Args:
            prompt: Full text prompt (Gemini gets no separate system role here)
            model: Gemini model name
            images: Decoded image bytes, sent as JPEG parts after the prompt

        Raises:
            LLMError: If Gemini is not configured or the call fails
        """
        if not self.gemini_configured:
            raise LLMError("Gemini API key is not configured")

        parts: List = [prompt]
        for image in images or ():
            parts.append({"mime_type": IMAGE_MIME_TYPE, "data": image})

        try:
            model_instance = genai.GenerativeModel(model_name=model)
            response = await model_instance.generate_content_async(parts)
            return response.text
        except Exception as e:
            logger.error(f"Gemini request failed ({model}): {e}")
            raise LLMError(f"Gemini request failed: {e}") from e
