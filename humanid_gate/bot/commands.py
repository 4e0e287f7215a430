from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Command:
    name: str
    argument: Optional[str] = None


def parse_command(content: str, verify_prefix: str = "!verify", signature_prefix: str = "!signature") -> Optional[Command]:
    """
    ``"!verify 0xabc extra"`` -> ``Command("!verify", "0xabc")``.

    The first token must equal a prefix exactly (case-sensitive). Only the
    first argument is kept; anything that is not a command gives ``None``.
    """
    tokens = (content or "").split()
    if not tokens or tokens[0] not in (verify_prefix, signature_prefix):
        return None
    return Command(name=tokens[0], argument=tokens[1] if len(tokens) > 1 else None)
