import os

from dotenv import load_dotenv

load_dotenv()

# OpenRouter speaks the OpenAI chat-completions dialect
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://openrouter.ai/api/v1")
LLM_API_KEY = os.getenv("OPENROUTER_API_KEY") or os.getenv("LLM_API_KEY", "")
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "30"))

CHAT_MODEL = os.getenv("CHAT_MODEL", "google/gemini-2.0-flash-exp:free")
CHAT_TEMPERATURE = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
CHAT_MAX_TOKENS = int(os.getenv("CHAT_MAX_TOKENS", "500"))

INSIGHT_MODEL = os.getenv("INSIGHT_MODEL", "anthropic/claude-3.5-sonnet")
INSIGHT_TEMPERATURE = float(os.getenv("INSIGHT_TEMPERATURE", "0.7"))
INSIGHT_MAX_TOKENS = int(os.getenv("INSIGHT_MAX_TOKENS", "150"))

# Attribution headers sent to OpenRouter
SITE_URL = os.getenv("SITE_URL", "http://localhost:8000")
APP_TITLE = os.getenv("APP_TITLE", "GenerationGap AI Therapist")
INSIGHT_SITE_URL = os.getenv("INSIGHT_SITE_URL", "https://family-connect-app.com")
INSIGHT_APP_TITLE = os.getenv("INSIGHT_APP_TITLE", "Family Connect App")

# Exchange turns kept per chat session, not counting the system turn
HISTORY_CEILING = int(os.getenv("HISTORY_CEILING", "20"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "8000"))
