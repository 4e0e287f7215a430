from unittest.mock import AsyncMock, MagicMock

import pytest

from humanid_gate.core.errors import InvalidAddressError, NetworkError
from humanid_gate.services.sbt import CredentialOracle
from humanid_gate.utils.address import is_valid_address, to_checksum

CONTRACT = "0x2AA822e264F8cc31A2b9C22f39e5551241e94DfB"
OWNER = "0xabcdef0123456789abcdef0123456789abcdef01"


def make_oracle(call: AsyncMock) -> CredentialOracle:
    oracle = CredentialOracle("http://localhost:8545", CONTRACT)
    oracle.contract = MagicMock()
    oracle.contract.functions.balanceOf.return_value.call = call
    return oracle


async def test_positive_balance_holds_credential():
    oracle = make_oracle(AsyncMock(return_value=1))

    assert await oracle.holds_credential(OWNER) is True
    oracle.contract.functions.balanceOf.assert_called_once_with(to_checksum(OWNER))


async def test_zero_balance_does_not_hold_credential():
    oracle = make_oracle(AsyncMock(return_value=0))

    assert await oracle.balance_of(OWNER) == 0
    assert await oracle.holds_credential(OWNER) is False


async def test_rpc_failure_is_network_error():
    oracle = make_oracle(AsyncMock(side_effect=ConnectionError("connection refused")))

    with pytest.raises(NetworkError) as exc_info:
        await oracle.holds_credential(OWNER)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


async def test_invalid_address_never_reaches_rpc():
    call = AsyncMock(return_value=1)
    oracle = make_oracle(call)

    with pytest.raises(InvalidAddressError):
        await oracle.holds_credential("0xnotanaddress")
    call.assert_not_awaited()


@pytest.mark.parametrize(
    "address, valid",
    [
        (OWNER, True),
        (OWNER.upper().replace("0X", "0x"), True),
        (CONTRACT, True),
        (OWNER[2:], False),
        (OWNER[:-1], False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_address(address, valid):
    assert is_valid_address(address) is valid


def test_to_checksum_normalises_case():
    assert to_checksum(CONTRACT.lower()) == CONTRACT
