# humanid_gate/services/verification.py
"""
Two-step wallet verification.

    idle --!verify <wallet>--> awaiting signature --!signature <sig>--> idle

``start`` checks the wallet holds the SBT and hands out a nonce,
``submit_signature`` checks the nonce was signed by that wallet and grants
the role. Both return a ``FlowResult``; faults from the services are turned
into outcomes here so nothing escapes to the chat client.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from humanid_gate.core.errors import (
    InvalidAddressError,
    NetworkError,
    RoleNotFoundError,
    SignatureFormatError,
)
from humanid_gate.models.challenge import PendingChallenge
from humanid_gate.services.challenges import ChallengeStore
from humanid_gate.services.roles import RoleGateway, assign_role
from humanid_gate.services.sbt import CredentialOracle
from humanid_gate.services.signatures import recover_signer

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    # !verify
    CHALLENGE_ISSUED = "challenge_issued"
    CREDENTIAL_NOT_HELD = "credential_not_held"
    INVALID_ADDRESS = "invalid_address"
    # !signature
    VERIFIED = "verified"
    NO_PENDING_CHALLENGE = "no_pending_challenge"
    SIGNATURE_MISMATCH = "signature_mismatch"
    SIGNATURE_FORMAT = "signature_format"
    ROLE_NOT_FOUND = "role_not_found"
    # either
    USAGE = "usage"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True)
class FlowResult:
    outcome: Outcome
    nonce: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.CHALLENGE_ISSUED, Outcome.VERIFIED)


class VerificationFlow:
    def __init__(
        self,
        store: ChallengeStore,
        oracle: CredentialOracle,
        roles: RoleGateway,
        role_name: str,
    ):
        self.store = store
        self.oracle = oracle
        self.roles = roles
        self.role_name = role_name
        # users whose signature is currently being redeemed
        self._in_flight: set[int] = set()

    async def start(self, user_id: int, wallet: Optional[str]) -> FlowResult:
        if not wallet:
            return FlowResult(Outcome.USAGE)

        wallet = wallet.strip().lower()
        try:
            holds = await self.oracle.holds_credential(wallet)
        except InvalidAddressError as e:
            return FlowResult(Outcome.INVALID_ADDRESS, detail=str(e))
        except NetworkError as e:
            logger.error("SBT lookup failed for user %s wallet %s: %s", user_id, wallet, e)
            return FlowResult(Outcome.NETWORK_ERROR, detail=str(e))

        if not holds:
            logger.info("User %s: wallet %s holds no SBT", user_id, wallet)
            return FlowResult(Outcome.CREDENTIAL_NOT_HELD)

        nonce = self.store.issue(user_id, wallet)
        logger.info("Issued challenge to user %s for wallet %s", user_id, wallet)
        return FlowResult(Outcome.CHALLENGE_ISSUED, nonce=nonce)

    async def submit_signature(self, user_id: int, guild_id: int, signature: Optional[str]) -> FlowResult:
        if not signature:
            return FlowResult(Outcome.USAGE)

        challenge = self.store.get(user_id)
        if challenge is None or user_id in self._in_flight:
            return FlowResult(Outcome.NO_PENDING_CHALLENGE)

        self._in_flight.add(user_id)
        try:
            return await self._redeem(user_id, guild_id, challenge, signature)
        finally:
            self._in_flight.discard(user_id)

    async def _redeem(self, user_id: int, guild_id: int, challenge: PendingChallenge, signature: str) -> FlowResult:
        try:
            recovered = recover_signer(challenge.nonce, signature)
        except SignatureFormatError as e:
            logger.exception("Signature verification error for user %s", user_id)
            return FlowResult(Outcome.SIGNATURE_FORMAT, detail=str(e))

        if recovered.lower() != challenge.claimed_wallet:
            logger.info(
                "User %s: signature recovered %s, expected %s",
                user_id, recovered.lower(), challenge.claimed_wallet,
            )
            return FlowResult(Outcome.SIGNATURE_MISMATCH)

        # The challenge is only spent once the role is actually granted
        try:
            await assign_role(self.roles, guild_id, user_id, self.role_name)
        except RoleNotFoundError as e:
            logger.warning("Guild %s has no role %r", guild_id, e.role_name)
            return FlowResult(Outcome.ROLE_NOT_FOUND, detail=e.role_name)
        except NetworkError as e:
            logger.error("Role assignment failed for user %s in guild %s: %s", user_id, guild_id, e)
            return FlowResult(Outcome.NETWORK_ERROR, detail=str(e))

        self.store.consume(user_id)
        logger.info("User %s verified wallet %s", user_id, challenge.claimed_wallet)
        return FlowResult(Outcome.VERIFIED)
