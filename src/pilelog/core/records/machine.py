"""
Dialogue flow for recording a driven pile.

The machine is transport-agnostic: it takes the text an operator sent and
returns the replies to show. Keyboards are plain rows of button labels, the
bot layer turns them into Telegram markup.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional

from pilelog.core.records.grouping import (
    compute_groups,
    find_group_by_label,
    is_group_label,
)
from pilelog.core.records import messages
from pilelog.core.records.sessions import Session
from pilelog.core.records.states import RecordStates
from pilelog.core.records.validators import DrivingDateValidator, ElevationValidator
from pilelog.integrations.backend.base import BackendError, BaseBackend

logger = logging.getLogger(__name__)


DEFAULT_GROUP_COUNT = 6


@dataclass
class Reply:
    """Message to send back to the operator."""
    text: str
    keyboard: Optional[list[list[str]]] = None   # Rows of button labels
    remove_keyboard: bool = False


StepHandler = Callable[[Session, str], Awaitable[list[Reply]]]


class DialogueMachine:
    """Drives a session through the record collection steps."""

    def __init__(
        self,
        backend: BaseBackend,
        project_id: int,
        pile_field_id: Optional[int] = None,
        group_count: int = DEFAULT_GROUP_COUNT,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.backend = backend
        self.project_id = project_id
        self.pile_field_id = pile_field_id
        self.group_count = group_count
        self.now = now

        # Keyed by state name, None is idle
        self._handlers: dict[Optional[str], StepHandler] = {
            None: self._handle_idle,
            RecordStates.selecting_pile.state: self._handle_pile,
            RecordStates.selecting_date.state: self._handle_date,
            RecordStates.entering_elevation.state: self._handle_elevation,
            RecordStates.entering_operator.state: self._handle_operator,
            RecordStates.entering_notes.state: self._handle_notes,
        }

    async def handle(self, session: Session, text: str) -> list[Reply]:
        """Process one message from the operator in the current step."""
        text = text.strip()
        step = session.step.state if session.step else None
        return await self._handlers[step](session, text)

    async def start_record(self, session: Session) -> list[Reply]:
        """Discard any record in progress and offer the pile menu."""
        session.start_record(self.project_id, self.pile_field_id)
        logger.info(f"Session {session.session_id}: new record")

        try:
            piles = await self.backend.get_piles(self.project_id)
        except BackendError as e:
            logger.warning(f"Session {session.session_id}: pile list unavailable: {e}")
            session.reset()
            return [Reply(messages.PILES_UNAVAILABLE_MESSAGE, remove_keyboard=True)]

        if not piles:
            session.reset()
            return [Reply(messages.NO_PILES_MESSAGE, remove_keyboard=True)]

        session.available_piles = list(piles)
        session.step = RecordStates.selecting_pile
        return [self._pile_menu(session, session.available_piles)]

    async def cancel(self, session: Session) -> list[Reply]:
        """Abandon the record in progress."""
        if not session.is_active:
            return [Reply(messages.NOTHING_TO_CANCEL_MESSAGE)]

        logger.info(f"Session {session.session_id}: record cancelled at {session.step.state}")
        session.reset()
        return [Reply(messages.CANCELLED_MESSAGE, remove_keyboard=True)]

    # =========================================================================
    # STEPS
    # =========================================================================

    async def _handle_idle(self, session: Session, text: str) -> list[Reply]:
        return [Reply(messages.IDLE_MESSAGE)]

    async def _handle_pile(self, session: Session, text: str) -> list[Reply]:
        if session.offered_piles is not None:
            choices = session.offered_piles
        else:
            # Range menu on screen: a typed pile number is still fine
            choices = session.available_piles

        if text not in choices:
            if not is_group_label(text):
                return [Reply(messages.INVALID_PILE_MESSAGE)]

            piles = find_group_by_label(session.navigation_history, text)
            if piles is None:
                return [Reply(messages.INVALID_GROUP_MESSAGE)]
            return [self._pile_menu(session, piles)]

        session.record.pile_number = text
        session.clear_navigation()
        session.step = RecordStates.selecting_date
        return [self._date_menu()]

    async def _handle_date(self, session: Session, text: str) -> list[Reply]:
        is_valid, start_date, error = DrivingDateValidator.validate(text, now=self.now)

        if not is_valid:
            return [Reply(error), self._date_menu()]

        session.record.start_date = start_date
        session.step = RecordStates.entering_elevation
        return [
            Reply(
                messages.ELEVATION_PROMPT.format(date=session.record.start_date_display),
                remove_keyboard=True,
            )
        ]

    async def _handle_elevation(self, session: Session, text: str) -> list[Reply]:
        is_valid, elevation, error = ElevationValidator.validate(text)

        if not is_valid:
            return [Reply(error)]

        session.record.fact_pile_head = elevation
        session.step = RecordStates.entering_operator
        return [Reply(messages.OPERATOR_PROMPT, keyboard=[[messages.CMD_SKIP]])]

    async def _handle_operator(self, session: Session, text: str) -> list[Reply]:
        if text and text != messages.CMD_SKIP:
            session.record.recorded_by = text

        session.step = RecordStates.entering_notes
        return [Reply(messages.NOTES_PROMPT, keyboard=[[messages.CMD_SKIP]])]

    async def _handle_notes(self, session: Session, text: str) -> list[Reply]:
        if text and text != messages.CMD_SKIP:
            session.record.notes = text

        return [await self._submit(session)]

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _pile_menu(self, session: Session, piles: list[str]) -> Reply:
        """Show piles one per button, or as ranges when there are too many."""
        if len(piles) <= self.group_count:
            session.offered_piles = list(piles)
            return Reply(
                messages.SELECT_PILE_PROMPT,
                keyboard=[[pile] for pile in piles],
            )

        groups = compute_groups(piles, self.group_count)
        session.navigation_history.append(groups)
        session.offered_piles = None
        return Reply(
            messages.SELECT_GROUP_PROMPT,
            keyboard=[[group.label] for group in groups],
        )

    def _date_menu(self) -> Reply:
        return Reply(
            messages.SELECT_DATE_PROMPT,
            keyboard=[[messages.TODAY_LABEL, messages.YESTERDAY_LABEL]],
        )

    async def _submit(self, session: Session) -> Reply:
        """Send the record and return to idle whatever the outcome."""
        record = session.record
        try:
            result = await self.backend.submit(record)
        finally:
            session.reset()

        if result.success:
            logger.info(
                f"Session {session.session_id}: pile {record.pile_number} recorded"
            )
            text = messages.SUBMIT_SUCCESS_MESSAGE.format(summary=record.format_summary())
        elif result.status_code is None:
            text = messages.SUBMIT_TRANSPORT_ERROR_MESSAGE.format(error=result.server_message)
        else:
            text = messages.SUBMIT_ERROR_MESSAGE.format(error=result.server_message)

        return Reply(text, remove_keyboard=True)

