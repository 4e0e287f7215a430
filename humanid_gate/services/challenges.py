# humanid_gate/services/challenges.py
import logging
import secrets
from typing import Optional, Protocol

from humanid_gate.models.challenge import PendingChallenge

logger = logging.getLogger(__name__)

# 16 bytes -> 32 hex characters
NONCE_BYTES = 16


def generate_nonce() -> str:
    return secrets.token_hex(NONCE_BYTES)


class ChallengeStore(Protocol):
    def issue(self, user_id: int, wallet: str) -> str: ...

    def get(self, user_id: int) -> Optional[PendingChallenge]: ...

    def consume(self, user_id: int) -> None: ...


class InMemoryChallengeStore:
    """
    Pending challenges keyed by chat user id.

    One record per user: issuing again replaces the previous challenge.
    Nothing expires and nothing survives a restart.
    """

    def __init__(self):
        self._pending: dict[int, PendingChallenge] = {}

    def issue(self, user_id: int, wallet: str) -> str:
        challenge = PendingChallenge(claimed_wallet=wallet.strip().lower(), nonce=generate_nonce())
        if user_id in self._pending:
            logger.debug("Replacing pending challenge for user %s", user_id)
        self._pending[user_id] = challenge
        return challenge.nonce

    def get(self, user_id: int) -> Optional[PendingChallenge]:
        return self._pending.get(user_id)

    def consume(self, user_id: int) -> None:
        self._pending.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, user_id) -> bool:
        return user_id in self._pending
