"""
Bot handlers registration.
"""

from aiogram import Dispatcher

from pilelog.bot.handlers.record import router as record_router


def register_handlers(dp: Dispatcher) -> None:
    """Register all handlers to dispatcher."""
    dp.include_router(record_router)
