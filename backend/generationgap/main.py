import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from generationgap import config
from generationgap.api import chat, families, health
from generationgap.families import FamilyStore
from generationgap.prompts import THERAPIST_SYSTEM_PROMPT
from generationgap.state import SessionStore

logging.basicConfig(level=config.LOG_LEVEL, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("generationgap")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Browser clients read the message from "error"
    return JSONResponse(
        {"detail": exc.detail, "error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(history_ceiling: Optional[int] = None) -> FastAPI:
    app = FastAPI(
        title="GenerationGap API",
        version="0.1.0",
        description="AI therapist chat relay and family journal backend.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One set of stores per application instance
    app.state.session_store = SessionStore(
        THERAPIST_SYSTEM_PROMPT,
        ceiling=history_ceiling if history_ceiling is not None else config.HISTORY_CEILING,
    )
    app.state.family_store = FamilyStore()

    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    api_prefix = "/api"
    app.include_router(health.router, prefix=api_prefix)
    app.include_router(chat.router, prefix=api_prefix)
    app.include_router(families.router, prefix=api_prefix)

    if not config.LLM_API_KEY:
        logger.warning("OPENROUTER_API_KEY is not set. Please set it in your .env file.")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("generationgap.main:app", host="0.0.0.0", port=config.PORT, reload=True)
