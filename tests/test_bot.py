from humanid_gate.bot.client import HumanIdBot, MessageHandler
from humanid_gate.services.roles import DiscordRoleGateway
from tests.helpers import FakeOracle, make_message


async def test_bot_wires_flow_to_discord(settings, store):
    bot = HumanIdBot(store=store, oracle=FakeOracle(), settings=settings)

    assert bot.intents.message_content
    assert bot.intents.guild_messages
    assert bot.intents.guilds
    assert isinstance(bot.flow.roles, DiscordRoleGateway)
    assert bot.flow.roles.client is bot
    assert bot.flow.role_name == settings.ROLE_NAME
    assert isinstance(bot.handler, MessageHandler)


async def test_on_message_delegates_to_handler(settings, store):
    bot = HumanIdBot(store=store, oracle=FakeOracle(), settings=settings)
    message = make_message("!signature deadbeef")

    await bot.on_message(message)

    message.reply.assert_awaited_once()
