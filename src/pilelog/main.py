"""
Pile-driving log Telegram bot - Main entry point.
"""

import asyncio
import logging
import sys

from pilelog.bot.bot import get_bot, get_dispatcher
from pilelog.bot.handlers import register_handlers
from pilelog.config import settings
from pilelog.core.records import SessionStore
from pilelog.core.records.machine import DialogueMachine
from pilelog.integrations.backend import get_backend


# Fix for Windows asyncio
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def main() -> None:
    """Main function to run the bot."""
    bot = get_bot()
    dp = get_dispatcher()
    backend = get_backend()

    # Shared with handlers through dispatcher workflow data
    dp["sessions"] = SessionStore(dp.fsm.storage)
    dp["machine"] = DialogueMachine(
        backend=backend,
        project_id=settings.project_id,
        pile_field_id=settings.pile_field_id,
        group_count=settings.group_count,
    )

    register_handlers(dp)

    async def on_shutdown() -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down pile log bot...")
        await backend.close()
        logger.info("Cleanup complete")

    dp.shutdown.register(on_shutdown)

    logger.info(
        f"Bot is starting (project {settings.project_id}, web service {settings.backend_url})..."
    )
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


def run() -> None:
    """Console script entry point."""
    configure_logging()
    asyncio.run(main())


if __name__ == "__main__":
    run()
