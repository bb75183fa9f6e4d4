import os

# Settings are read at import time and the token is mandatory
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")

from datetime import datetime

import pytest
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

from pilelog.core.records import PendingRecord, Session, SessionStore, SubmissionResult
from pilelog.core.records.machine import DialogueMachine
from pilelog.integrations.backend import BaseBackend


PROJECT_ID = 1
PILE_FIELD_ID = 3
BOT_ID = 123456

# Half past midnight local time, first of March
FIXED_NOW = datetime(2026, 3, 1, 0, 30)


class FakeBackend(BaseBackend):
    """Web service stand-in that records what the machine sends."""

    def __init__(self):
        self.piles: list[str] = []
        self.error: Exception | None = None
        self.result = SubmissionResult(success=True, server_message="200 OK", status_code=200)
        self.submit_error: Exception | None = None
        self.requested_projects: list[int] = []
        self.submitted: list[PendingRecord] = []

    async def get_piles(self, project_id: int) -> list[str]:
        self.requested_projects.append(project_id)
        if self.error is not None:
            raise self.error
        return list(self.piles)

    async def submit(self, record: PendingRecord) -> SubmissionResult:
        self.submitted.append(record)
        if self.submit_error is not None:
            raise self.submit_error
        return self.result


def pile_numbers(count: int) -> list[str]:
    return [f"P-{i}" for i in range(1, count + 1)]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def machine(backend):
    return DialogueMachine(
        backend=backend,
        project_id=PROJECT_ID,
        pile_field_id=PILE_FIELD_ID,
        group_count=6,
        now=lambda: FIXED_NOW,
    )


def storage_key(chat_id: int = 42) -> StorageKey:
    return StorageKey(bot_id=BOT_ID, chat_id=chat_id, user_id=chat_id)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def sessions(storage):
    return SessionStore(storage)


@pytest.fixture
def session():
    return Session(session_id=42)
