from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class PendingChallenge:
    claimed_wallet: str  # lower-cased
    nonce: str
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
