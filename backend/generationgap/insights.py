import logging
from typing import Callable

from generationgap import config
from generationgap.llm_client import LLMError
from generationgap.prompts import FAMILY_THERAPIST_SYSTEM_PROMPT, build_insight_prompt

logger = logging.getLogger(__name__)

INSIGHT_UNAVAILABLE = "AI insight temporarily unavailable. Please try again later."


def get_ai_insight(complete: Callable[..., str], content: str, mood: str, entry_type: str) -> str:
    """Ask the model for a short therapist comment on a journal entry.

    Never raises on gateway failure; the placeholder text is returned instead
    so the entry can still be saved.
    """
    messages = [
        {"role": "system", "content": FAMILY_THERAPIST_SYSTEM_PROMPT},
        {"role": "user", "content": build_insight_prompt(content, mood, entry_type)},
    ]
    try:
        insight = complete(
            messages,
            model=config.INSIGHT_MODEL,
            temperature=config.INSIGHT_TEMPERATURE,
            max_tokens=config.INSIGHT_MAX_TOKENS,
            referer=config.INSIGHT_SITE_URL,
            title=config.INSIGHT_APP_TITLE,
        )
    except LLMError as exc:
        logger.warning("AI insight error: %s", exc)
        return INSIGHT_UNAVAILABLE
    return insight.strip() or INSIGHT_UNAVAILABLE
