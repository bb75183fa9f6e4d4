"""
Record collection handlers.
Commands start and cancel a record, every other text message is passed to the
dialogue machine in the chat's current step.
"""

import logging
from typing import Awaitable, Callable

from aiogram import F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from pilelog.bot.keyboards.record import get_reply_markup
from pilelog.core.records import Session, SessionStore
from pilelog.core.records import messages
from pilelog.core.records.machine import DialogueMachine, Reply

logger = logging.getLogger(__name__)

router = Router(name="records")


async def send_replies(message: Message, replies: list[Reply]) -> None:
    """Send replies in order; a failed send is logged and the rest still go out."""
    for reply in replies:
        try:
            await message.answer(reply.text, reply_markup=get_reply_markup(reply))
        except TelegramAPIError:
            logger.exception(f"Failed to send reply to chat {message.chat.id}")


async def run_step(
    message: Message,
    state: FSMContext,
    sessions: SessionStore,
    action: Callable[[Session], Awaitable[list[Reply]]],
) -> None:
    """Load the chat's session, apply the action and store the result."""
    session = await sessions.get(state.key)
    try:
        replies = await action(session)
    except Exception:
        step = session.step.state if session.step else None
        logger.exception(f"Unhandled error in chat {message.chat.id} at step {step}")
        await sessions.reset(state.key)
        replies = [Reply(messages.UNEXPECTED_ERROR_MESSAGE, remove_keyboard=True)]
    else:
        await sessions.save(state.key, session)

    await send_replies(message, replies)


@router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    """Handle /start command."""
    await send_replies(message, [Reply(messages.WELCOME_MESSAGE)])


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    """Handle /help command."""
    await send_replies(message, [Reply(messages.HELP_MESSAGE)])


@router.message(Command("newrecord"))
async def cmd_new_record(
    message: Message,
    state: FSMContext,
    sessions: SessionStore,
    machine: DialogueMachine,
) -> None:
    """Handle /newrecord command - fetch piles and show the pile menu."""
    await run_step(message, state, sessions, machine.start_record)


@router.message(Command("cancel"))
async def cmd_cancel(
    message: Message,
    state: FSMContext,
    sessions: SessionStore,
    machine: DialogueMachine,
) -> None:
    """Handle /cancel command."""
    await run_step(message, state, sessions, machine.cancel)


@router.message(F.text)
async def handle_text(
    message: Message,
    state: FSMContext,
    sessions: SessionStore,
    machine: DialogueMachine,
) -> None:
    """Handle operator input in the current step."""

    async def step(session: Session) -> list[Reply]:
        return await machine.handle(session, message.text)

    await run_step(message, state, sessions, step)


@router.message()
async def handle_non_text(message: Message) -> None:
    """Stickers, photos and the like are not part of the flow."""
    await send_replies(message, [Reply(messages.NON_TEXT_MESSAGE)])
