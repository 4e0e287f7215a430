import re

from web3 import Web3

from humanid_gate.core.errors import InvalidAddressError

_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_address(address: str) -> bool:
    return bool(address and _ADDRESS_RE.match(address.strip()))


def to_checksum(address: str) -> str:
    if not is_valid_address(address):
        raise InvalidAddressError(address)
    return Web3.to_checksum_address(address.strip().lower())
