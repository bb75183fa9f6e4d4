"""
Conversation state per chat, kept in aiogram FSM storage.
"""

from dataclasses import dataclass, field
from typing import Optional

from aiogram.fsm.state import State
from aiogram.fsm.storage.base import BaseStorage, StorageKey

from pilelog.core.records.grouping import Group
from pilelog.core.records.models import PendingRecord
from pilelog.core.records.states import resolve_state


@dataclass
class Session:
    """Conversation state of one chat."""
    session_id: int
    step: Optional[State] = None   # None: no record in progress
    record: Optional[PendingRecord] = None

    # Pile selection
    available_piles: list[str] = field(default_factory=list)
    navigation_history: list[list[Group]] = field(default_factory=list)
    offered_piles: Optional[list[str]] = None  # None while a range menu is shown

    def start_record(
        self, project_id: int, pile_field_id: Optional[int] = None
    ) -> PendingRecord:
        """Drop whatever was in progress and start an empty record."""
        self.reset()
        self.record = PendingRecord(
            project_id=project_id,
            pile_field_id=pile_field_id,
        )
        return self.record

    def reset(self) -> None:
        """Return to idle, discarding the record and menu history."""
        self.step = None
        self.record = None
        self.available_piles = []
        self.clear_navigation()

    def clear_navigation(self) -> None:
        self.navigation_history = []
        self.offered_piles = None

    @property
    def is_active(self) -> bool:
        return self.step is not None

    def to_dict(self) -> dict:
        """Convert everything but the step to FSM data."""
        return {
            "record": self.record.to_dict() if self.record else None,
            "available_piles": self.available_piles,
            "navigation_history": [
                [list(group.piles) for group in level]
                for level in self.navigation_history
            ],
            "offered_piles": self.offered_piles,
        }

    @classmethod
    def from_dict(cls, session_id: int, step: Optional[State], data: dict) -> "Session":
        """Restore session from FSM state and data."""
        record_data = data.get("record")
        return cls(
            session_id=session_id,
            step=step,
            record=PendingRecord.from_dict(record_data) if record_data else None,
            available_piles=list(data.get("available_piles", [])),
            navigation_history=[
                [Group(tuple(piles)) for piles in level]
                for level in data.get("navigation_history", [])
            ],
            offered_piles=data.get("offered_piles"),
        )


class SessionStore:
    """
    Sessions kept in the dispatcher's FSM storage.

    The FSM state holds the dialogue step, the FSM data holds the record and
    pile menus. The dispatcher isolates events per chat, so a session is
    never loaded by two updates at once.
    """

    def __init__(self, storage: BaseStorage):
        self.storage = storage

    async def get(self, key: StorageKey) -> Session:
        """Get session of the chat; a chat never seen before gets an idle one."""
        step = resolve_state(await self.storage.get_state(key))
        data = await self.storage.get_data(key)
        session = Session.from_dict(key.chat_id, step, data)
        if step is None and session.record is not None:
            # Record without a step cannot be continued
            session.reset()
        return session

    async def save(self, key: StorageKey, session: Session) -> None:
        await self.storage.set_state(key, session.step)
        await self.storage.set_data(key, session.to_dict())

    async def reset(self, key: StorageKey) -> None:
        """Forget the chat's record in progress."""
        await self.storage.set_state(key, None)
        await self.storage.set_data(key, {})
