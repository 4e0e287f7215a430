import discord

from humanid_gate.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Install discord.py's handler/formatter on the root logger."""
    discord.utils.setup_logging(level=level or settings.LOG_LEVEL, root=True)
