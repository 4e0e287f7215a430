# humanid_gate/services/signatures.py
from eth_account import Account
from eth_account.messages import encode_defunct

from humanid_gate.core.errors import SignatureFormatError


def recover_signer(message: str, signature: str) -> str:
    """
    Recover the address that personal-signed (EIP-191) ``message``.

    The message is signed as-is: wallets sign the literal nonce text, not a
    hash of it.
    """
    encoded_msg = encode_defunct(text=message)
    try:
        return Account.recover_message(encoded_msg, signature=signature.strip())
    except Exception as e:
        raise SignatureFormatError(f"Could not recover signer: {e}") from e

