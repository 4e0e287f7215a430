# humanid_gate/services/roles.py
import logging
from typing import Any, Optional, Protocol

import discord

from humanid_gate.core.errors import NetworkError, RoleNotFoundError

logger = logging.getLogger(__name__)


class RoleGateway(Protocol):
    """What the verification flow needs from the chat platform."""

    def find_role_by_name(self, guild_id: int, role_name: str) -> Optional[Any]: ...

    async def fetch_member(self, guild_id: int, user_id: int) -> Any: ...

    async def add_role(self, member: Any, role: Any) -> None: ...


async def assign_role(gateway: RoleGateway, guild_id: int, user_id: int, role_name: str) -> None:
    """
    Give ``role_name`` to the user. The role must already exist in the guild;
    it is never created here.
    """
    role = gateway.find_role_by_name(guild_id, role_name)
    if role is None:
        raise RoleNotFoundError(role_name)

    member = await gateway.fetch_member(guild_id, user_id)
    await gateway.add_role(member, role)


class DiscordRoleGateway:
    def __init__(self, client: discord.Client, reason: str = "Human ID wallet verification"):
        self.client = client
        self.reason = reason

    def _guild(self, guild_id: int) -> discord.Guild:
        guild = self.client.get_guild(guild_id)
        if guild is None:
            raise NetworkError(f"Guild {guild_id} is not available to the bot")
        return guild

    def find_role_by_name(self, guild_id: int, role_name: str) -> Optional[discord.Role]:
        return discord.utils.get(self._guild(guild_id).roles, name=role_name)

    async def fetch_member(self, guild_id: int, user_id: int) -> discord.Member:
        try:
            return await self._guild(guild_id).fetch_member(user_id)
        except discord.HTTPException as e:
            raise NetworkError(f"Could not fetch member {user_id}: {e}") from e

    async def add_role(self, member: discord.Member, role: discord.Role) -> None:
        try:
            await member.add_roles(role, reason=self.reason)
        except discord.HTTPException as e:
            raise NetworkError(f"Could not add role {role.name!r} to {member.id}: {e}") from e
