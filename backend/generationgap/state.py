import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

ROLES = ("system", "user", "assistant")


class NotFoundError(KeyError):
    """Raised when a store is asked about an identifier it does not hold."""


@dataclass(frozen=True)
class Turn:
    role: str
    text: str

    def as_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.text}


Transcript = Tuple[Turn, ...]


def trim_transcript(turns: List[Turn], ceiling: int) -> None:
    """Drop the oldest non-system turns, two at a time, until at most
    ``ceiling + 1`` turns remain.

    Counts turns only; a single long turn can still exceed the model's
    context window.
    """
    while len(turns) > ceiling + 1:
        del turns[1:3]


class SessionStore:
    """In-memory chat transcripts keyed by session id. Suitable for demos only.

    A single lock guards the registry, so every operation on a session is
    atomic with respect to every other one, including ``get_or_create``
    racing ``clear``.
    """

    def __init__(self, system_prompt: str, ceiling: int = 20) -> None:
        if ceiling < 1:
            raise ValueError(f"ceiling must be a positive integer, got {ceiling}")
        self.system_prompt = system_prompt
        self.ceiling = ceiling
        self._store: Dict[str, List[Turn]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._store

    def _get_or_create_locked(self, session_id: str) -> List[Turn]:
        turns = self._store.get(session_id)
        if turns is None:
            turns = [Turn("system", self.system_prompt)]
            self._store[session_id] = turns
            logger.info("Created chat session %s", session_id)
        return turns

    def get_or_create(self, session_id: str) -> Transcript:
        with self._lock:
            return tuple(self._get_or_create_locked(session_id))

    def start_turn(self, session_id: str, text: str) -> Transcript:
        """Create the session if needed, append a user turn and return the
        trimmed transcript, all under one lock acquisition."""
        with self._lock:
            turns = self._get_or_create_locked(session_id)
            turns.append(Turn("user", text))
            trim_transcript(turns, self.ceiling)
            return tuple(turns)

    def append(self, session_id: str, role: str, text: str) -> None:
        if role not in ROLES:
            raise ValueError(f"unknown role {role!r}")
        with self._lock:
            turns = self._store.get(session_id)
            if turns is None:
                raise NotFoundError(session_id)
            turns.append(Turn(role, text))
            trim_transcript(turns, self.ceiling)

    def history(self, session_id: str) -> Transcript:
        with self._lock:
            turns = self._store.get(session_id)
            if turns is None:
                raise NotFoundError(session_id)
            return tuple(turns)

    def clear(self, session_id: str) -> None:
        with self._lock:
            if session_id not in self._store:
                raise NotFoundError(session_id)
            del self._store[session_id]
        logger.info("Cleared chat session %s", session_id)
