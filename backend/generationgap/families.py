import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from generationgap.models import Family, FamilyMember, JournalEntry
from generationgap.state import NotFoundError

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FamilyStore:
    """In-memory families and their journal entries. Nothing survives a restart."""

    def __init__(self) -> None:
        self._families: Dict[str, Family] = {}
        self._entries: Dict[str, List[JournalEntry]] = {}
        self._lock = threading.Lock()

    def create_family(self, name: str, parent_name: str, teen_name: str) -> Family:
        family = Family(
            id=str(uuid.uuid4()),
            name=name,
            parent=FamilyMember(name=parent_name, role="parent"),
            teen=FamilyMember(name=teen_name, role="teen"),
            created_at=_now(),
        )
        with self._lock:
            self._families[family.id] = family
            self._entries[family.id] = []
        logger.info("Created family %s", family.id)
        return family

    def get_family(self, family_id: str) -> Family:
        with self._lock:
            family = self._families.get(family_id)
        if family is None:
            raise NotFoundError(family_id)
        return family

    def add_entry(
        self,
        family_id: str,
        author: str,
        content: str,
        mood: str,
        entry_type: str,
        ai_insight: Optional[str] = None,
    ) -> JournalEntry:
        entry = JournalEntry(
            id=str(uuid.uuid4()),
            family_id=family_id,
            author=author,
            content=content,
            mood=mood,
            entry_type=entry_type,
            timestamp=_now(),
            ai_insight=ai_insight,
        )
        with self._lock:
            if family_id not in self._families:
                raise NotFoundError(family_id)
            self._entries[family_id].append(entry)
        logger.info("Added %s journal entry %s to family %s", entry_type, entry.id, family_id)
        return entry

    def list_entries(self, family_id: str) -> List[JournalEntry]:
        with self._lock:
            if family_id not in self._families:
                raise NotFoundError(family_id)
            return list(self._entries[family_id])
