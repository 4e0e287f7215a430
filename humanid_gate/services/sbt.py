# humanid_gate/services/sbt.py
import logging
from functools import lru_cache

import aiohttp
from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider

from humanid_gate.core.config import settings
from humanid_gate.core.errors import NetworkError
from humanid_gate.utils.address import to_checksum

logger = logging.getLogger(__name__)

# Human ID SBT only needs the ERC-721 style balance query
SBT_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    }
]


class CredentialOracle:
    """Read-only view of the SBT contract: does an address hold the credential?"""

    def __init__(self, rpc_url: str, contract_address: str, timeout: float = 15):
        self.rpc_url = rpc_url
        self.w3 = AsyncWeb3(
            AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)})
        )
        self.contract = self.w3.eth.contract(address=to_checksum(contract_address), abi=SBT_ABI)

    async def balance_of(self, address: str) -> int:
        owner = to_checksum(address)
        try:
            balance = await self.contract.functions.balanceOf(owner).call()
        except Exception as e:
            logger.warning("balanceOf(%s) failed against %s: %s", owner, self.rpc_url, e)
            raise NetworkError(f"Balance lookup failed: {e}") from e
        return int(balance)

    async def holds_credential(self, address: str) -> bool:
        return await self.balance_of(address) > 0


@lru_cache
def get_oracle() -> CredentialOracle:
    return CredentialOracle(
        rpc_url=settings.OPTIMISM_RPC_URL,
        contract_address=settings.SBT_CONTRACT_ADDRESS,
        timeout=settings.RPC_TIMEOUT_SECONDS,
    )
