# humanid_gate/core/errors.py
"""
Faults raised by the services.

Expected rejections (no credential, wrong signer, nothing pending) are not
exceptions; the flow controller reports them as ``Outcome`` values.
"""


class HumanIdGateError(Exception):
    """Base class for every fault raised by this package."""


class NetworkError(HumanIdGateError):
    """RPC node or chat platform call failed."""


class SignatureFormatError(HumanIdGateError):
    """Signature could not be parsed or no signer could be recovered."""


class InvalidAddressError(HumanIdGateError):
    def __init__(self, address: str):
        super().__init__(f"Invalid wallet address: {address!r}")
        self.address = address


class RoleNotFoundError(HumanIdGateError):
    def __init__(self, role_name: str):
        super().__init__(f'Role "{role_name}" not found')
        self.role_name = role_name
