"""
Fake chain/platform collaborators and signing helpers for tests.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

from eth_account import Account
from eth_account.messages import encode_defunct

from humanid_gate.core.errors import InvalidAddressError
from humanid_gate.utils.address import is_valid_address

ROLE_NAME = "Human ID verified"
GUILD_ID = 4242
USER_ID = 1001


class FakeOracle:
    """Balances keyed by lower-cased address; ``error`` is raised on every call."""

    def __init__(self, balances=None, error=None):
        self.balances = {k.lower(): v for k, v in (balances or {}).items()}
        self.error = error
        self.calls = []

    async def holds_credential(self, address: str) -> bool:
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        if not is_valid_address(address):
            raise InvalidAddressError(address)
        return self.balances.get(address.lower(), 0) > 0


class FakeRoleGateway:
    def __init__(self, roles=(ROLE_NAME,)):
        self.roles = set(roles)
        self.added = []
        self.fetch_error = None

    def find_role_by_name(self, guild_id, role_name):
        return role_name if role_name in self.roles else None

    async def fetch_member(self, guild_id, user_id):
        if self.fetch_error is not None:
            raise self.fetch_error
        return user_id

    async def add_role(self, member, role):
        self.added.append((member, role))


def sign(nonce: str, private_key) -> str:
    """Personal-sign ``nonce`` the way a browser wallet would."""
    signed = Account.sign_message(encode_defunct(text=nonce), private_key=private_key)
    return "0x" + bytes(signed.signature).hex()


def make_message(content, author_id=USER_ID, bot=False, guild_id=GUILD_ID):
    """Minimal stand-in for discord.Message."""
    return SimpleNamespace(
        content=content,
        author=SimpleNamespace(id=author_id, bot=bot),
        guild=SimpleNamespace(id=guild_id) if guild_id is not None else None,
        reply=AsyncMock(),
    )


class SlowRoleGateway(FakeRoleGateway):
    """Yields to the event loop while fetching the member, like a real API call."""

    async def fetch_member(self, guild_id, user_id):
        await asyncio.sleep(0.01)
        return await super().fetch_member(guild_id, user_id)
