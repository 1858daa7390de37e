"""LLM module - provider clients, prompt templates and reply parsing."""
from dayrhythm.llm.client import LLMClient
from dayrhythm.llm.parsing import parse_event_list, parse_string_list, strip_code_fences

__all__ = [
    "LLMClient",
    "parse_event_list",
    "parse_string_list",
    "strip_code_fences",
]
