import logging
from typing import Dict, List, Optional

import requests

from generationgap import config

logger = logging.getLogger(__name__)


class LLMError(RuntimeError):
    """Completion request failed; ``status_code`` is the upstream HTTP status when known."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def complete(
    messages: List[Dict[str, str]],
    model: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 500,
    referer: Optional[str] = None,
    title: Optional[str] = None,
) -> str:
    if not config.LLM_API_KEY:
        raise LLMError("OPENROUTER_API_KEY (or LLM_API_KEY) is not set.")

    base = config.LLM_BASE_URL.rstrip("/")
    url = f"{base}/chat/completions"
    headers = {
        "Authorization": f"Bearer {config.LLM_API_KEY}",
        "Content-Type": "application/json",
        "HTTP-Referer": referer or config.SITE_URL,
        "X-Title": title or config.APP_TITLE,
    }
    payload = {
        "model": model or config.CHAT_MODEL,
        "messages": messages,
        "temperature": float(temperature),
        "max_tokens": int(max_tokens),
    }

    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=config.LLM_TIMEOUT)
    except requests.RequestException as exc:
        raise LLMError(f"LLM request failed: {exc}") from exc

    if resp.status_code != 200:
        logger.warning("LLM returned %s for model %s", resp.status_code, payload["model"])
        raise LLMError(f"LLM returned {resp.status_code}: {resp.text}", status_code=resp.status_code)

    try:
        data = resp.json()
    except ValueError as exc:
        raise LLMError(f"Failed to parse LLM response JSON: {exc}") from exc

    # Expecting OpenAI-like response shape
    try:
        choice = data.get("choices", [])[0]
        message = choice.get("message") if isinstance(choice, dict) else None
        content = None
        if message:
            content = message.get("content")
        if not content:
            content = choice.get("text") if isinstance(choice, dict) else None
        return (content or "").strip()
    except (AttributeError, IndexError, TypeError) as exc:
        raise LLMError(f"Unexpected LLM response shape: {exc}") from exc
