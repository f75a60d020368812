"""
Stepline - Application Entry Point
==================================

Bootstrap
---------
- Config validation
- Steps service construction
- Bot lifecycle management
- Graceful shutdown
"""

import asyncio
import signal
import sys

from src.core.bot.steps_bot import StepsBot
from src.core.config.config import Config
from src.core.logging.logger import get_logger, shutdown_logging
from src.modules.steps.service import StepsService

logger = get_logger(__name__)


# ============================================================================
# Application Bootstrap
# ============================================================================

def _startup() -> StepsBot:
    """Validate configuration and build the bot."""
    logger.info("========== STEPLINE INITIALIZATION START ==========")

    # Step 1: Validate configuration early
    try:
        Config.validate()
        if not Config.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required to run the bot")
        logger.info("✓ Configuration validated")
    except Exception as exc:
        logger.critical(f"Configuration validation failed: {exc}")
        raise

    # Step 2: Build the steps service and the bot that owns it
    try:
        bot = StepsBot(service=StepsService())
        logger.info("✓ Bot initialized")
    except Exception as exc:
        logger.critical(f"Bot initialization failed: {exc}", exc_info=True)
        raise

    logger.info("========== INITIALIZED SUCCESSFULLY ==========")
    return bot


# ============================================================================
# Application Shutdown
# ============================================================================

async def _shutdown(bot: StepsBot | None) -> None:
    """Gracefully shut down the bot."""
    logger.info("========== STEPLINE SHUTDOWN START ==========")

    if bot and not bot.is_closed():
        try:
            await bot.close()
            logger.info("✓ Bot closed")
        except Exception as exc:
            logger.error(f"Error while closing bot: {exc}", exc_info=True)

    logger.info("========== SHUTDOWN COMPLETE ==========")


# ============================================================================
# Application Entrypoint
# ============================================================================

async def main() -> None:
    """
    Stepline entry point.

    Lifecycle:
        1. Validate configuration
        2. Build service and bot
        3. Start bot
        4. Handle shutdown gracefully
    """
    bot: StepsBot | None = None

    try:
        bot = _startup()

        logger.info("Starting Stepline Discord bot...")
        await bot.start(Config.DISCORD_TOKEN)

    except asyncio.CancelledError:
        logger.warning("Asyncio task cancellation received; shutting down gracefully.")
        raise

    except KeyboardInterrupt:
        logger.info("Manual shutdown via keyboard interrupt.")

    except Exception as exc:
        logger.critical(f"Fatal startup error: {exc}", exc_info=True)
        sys.exit(1)

    finally:
        await _shutdown(bot)


# ============================================================================
# Process Startup
# ============================================================================

def _install_signal_handlers(loop: asyncio.AbstractEventLoop, main_task: asyncio.Task) -> None:
    """SIGTERM cancels the main task so ``main()`` can close the bot."""
    try:
        loop.add_signal_handler(signal.SIGTERM, main_task.cancel)
        logger.debug("SIGTERM handler installed")
    except NotImplementedError:
        logger.debug("SIGTERM not supported on this platform (likely Windows)")


def run() -> None:
    """Console script entry point."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    main_task = loop.create_task(main())
    _install_signal_handlers(loop, main_task)

    try:
        loop.run_until_complete(main_task)
    except asyncio.CancelledError:
        logger.info("Bot stopped by SIGTERM.")
    except KeyboardInterrupt:
        logger.info("Bot manually stopped via keyboard interrupt.")
    except Exception as exc:
        logger.critical(f"Startup failure: {exc}", exc_info=True)
        sys.exit(1)
    finally:
        loop.close()
        logger.info("Event loop closed.")
        shutdown_logging()


if __name__ == "__main__":
    run()
