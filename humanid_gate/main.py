# humanid_gate/main.py
import asyncio
import logging
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from humanid_gate.core.config import Settings, settings
from humanid_gate.routers import verify

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(title=app_settings.APP_NAME)

    @app.get("/")
    def read_root():
        return {"message": f"{app_settings.APP_NAME} running"}

    # Routers
    app.include_router(verify.router)
    return app


app = create_app()


async def serve(app_settings: Settings = settings) -> None:
    """Run the Discord bot and, if enabled, the debug API on one event loop."""
    from humanid_gate.bot.client import HumanIdBot
    from humanid_gate.services.challenges import InMemoryChallengeStore
    from humanid_gate.services.sbt import get_oracle

    bot = HumanIdBot(store=InMemoryChallengeStore(), oracle=get_oracle(), settings=app_settings)
    tasks = [bot.start(app_settings.BOT_TOKEN)]

    if app_settings.DEBUG_API_ENABLED:
        config = uvicorn.Config(app, host=app_settings.API_HOST, port=app_settings.API_PORT, log_config=None)
        tasks.append(uvicorn.Server(config).serve())
        logger.info("API running on port %s", app_settings.API_PORT)

    try:
        await asyncio.gather(*tasks)
    finally:
        if not bot.is_closed():
            await bot.close()


def run() -> None:
    from humanid_gate.core.logger import setup_logging

    setup_logging()
    if not settings.bot_configured():
        logger.error("BOT_TOKEN is not set; refusing to start the bot.")
        sys.exit(1)

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    run()
