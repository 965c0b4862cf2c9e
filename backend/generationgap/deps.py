from typing import Callable

from fastapi import Request

from generationgap import llm_client
from generationgap.families import FamilyStore
from generationgap.state import SessionStore


def get_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_family_store(request: Request) -> FamilyStore:
    return request.app.state.family_store


def get_llm() -> Callable[..., str]:
    return llm_client.complete
