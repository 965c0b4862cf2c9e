import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from generationgap import config
from generationgap.deps import get_llm, get_store
from generationgap.llm_client import LLMError
from generationgap.models import ChatMessage, ChatRequest, ChatResponse, ClearRequest, MessageResponse
from generationgap.state import NotFoundError, SessionStore, Transcript

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def _visible_history(transcript: Transcript) -> list[ChatMessage]:
    # The seeded system turn is never shown to the client
    return [ChatMessage(role=t.role, content=t.text) for t in transcript if t.role != "system"]


def _error_for(exc: LLMError) -> HTTPException:
    if exc.status_code == 401:
        return HTTPException(
            status_code=401,
            detail="Authentication failed. Please check your OpenRouter API key.",
        )
    if exc.status_code == 429:
        return HTTPException(status_code=429, detail="Rate limit exceeded. Please try again later.")
    return HTTPException(
        status_code=500,
        detail="An error occurred while processing your request. Please try again.",
    )


@router.post("/chat", response_model=ChatResponse)
def chat(
    req: ChatRequest,
    store: SessionStore = Depends(get_store),
    complete: Callable[..., str] = Depends(get_llm),
) -> ChatResponse:
    transcript = store.start_turn(req.session_id, req.message)

    try:
        reply = complete(
            [t.as_message() for t in transcript],
            model=config.CHAT_MODEL,
            temperature=config.CHAT_TEMPERATURE,
            max_tokens=config.CHAT_MAX_TOKENS,
        )
    except LLMError as exc:
        logger.exception("Error in chat endpoint for session %s", req.session_id)
        raise _error_for(exc) from exc

    try:
        store.append(req.session_id, "assistant", reply)
        transcript = store.history(req.session_id)
    except NotFoundError:
        # Cleared while the completion was in flight; the reply is still returned
        logger.info("Session %s cleared before reply was stored", req.session_id)
        transcript = ()

    return ChatResponse(
        session_id=req.session_id,
        response=reply,
        history=_visible_history(transcript),
    )


@router.post("/clear", response_model=MessageResponse)
def clear(req: ClearRequest, store: SessionStore = Depends(get_store)) -> MessageResponse:
    try:
        store.clear(req.session_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Invalid sessionId")
    return MessageResponse(message="Conversation cleared")


@router.get("/chat/history", response_model=list[ChatMessage])
def get_history(session_id: str, store: SessionStore = Depends(get_store)) -> list[ChatMessage]:
    try:
        transcript = store.history(session_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Invalid sessionId")
    return _visible_history(transcript)
