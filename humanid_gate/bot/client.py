# humanid_gate/bot/client.py
import logging

import discord

from humanid_gate.bot.commands import parse_command
from humanid_gate.bot.replies import GUILD_ONLY, render_reply
from humanid_gate.core.config import Settings
from humanid_gate.services.challenges import ChallengeStore
from humanid_gate.services.roles import DiscordRoleGateway
from humanid_gate.services.sbt import CredentialOracle
from humanid_gate.services.verification import VerificationFlow

logger = logging.getLogger(__name__)


class MessageHandler:
    """Turns chat messages into flow calls and flow results into replies."""

    def __init__(self, flow: VerificationFlow, settings: Settings):
        self.flow = flow
        self.settings = settings

    async def handle(self, message) -> None:
        if message.author.bot:
            return

        command = parse_command(
            message.content, self.settings.VERIFY_COMMAND, self.settings.SIGNATURE_COMMAND
        )
        if command is None:
            return

        user_id = message.author.id
        if command.name == self.settings.VERIFY_COMMAND:
            result = await self.flow.start(user_id, command.argument)
        else:
            if message.guild is None and command.argument:
                await message.reply(GUILD_ONLY.format(signature=self.settings.SIGNATURE_COMMAND))
                return
            guild_id = message.guild.id if message.guild else None
            result = await self.flow.submit_signature(user_id, guild_id, command.argument)

        await message.reply(render_reply(result, command.name, self.settings))


def build_intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class HumanIdBot(discord.Client):
    def __init__(self, store: ChallengeStore, oracle: CredentialOracle, settings: Settings, **options):
        super().__init__(intents=build_intents(), **options)
        self.settings = settings
        self.flow = VerificationFlow(
            store=store,
            oracle=oracle,
            roles=DiscordRoleGateway(self),
            role_name=settings.ROLE_NAME,
        )
        self.handler = MessageHandler(self.flow, settings)

    async def on_ready(self):
        logger.info("Logged in as %s", self.user)

    async def on_message(self, message: discord.Message):
        await self.handler.handle(message)
