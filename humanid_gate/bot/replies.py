# humanid_gate/bot/replies.py
from humanid_gate.core.config import Settings, settings as default_settings
from humanid_gate.services.verification import FlowResult, Outcome

GUILD_ONLY = "Please send `{signature}` in the server where you want the role, not in a direct message."


def render_reply(result: FlowResult, command: str, settings: Settings = default_settings) -> str:
    verify = settings.VERIFY_COMMAND
    signature = settings.SIGNATURE_COMMAND
    outcome = result.outcome

    if outcome is Outcome.USAGE:
        if command == signature:
            return f"Please provide your signed message. Example: `{signature} <signedMessage>`"
        return f"Please provide your wallet address. Example: `{verify} 0xYourWalletAddress`"

    if outcome is Outcome.CHALLENGE_ISSUED:
        return (
            "To verify your wallet, please sign the following message in your wallet and send it back:\n\n"
            f"`{result.nonce}`\n\n"
            f"Then reply with: {signature} <signedMessage>"
        )
    if outcome is Outcome.CREDENTIAL_NOT_HELD:
        return "This wallet does not hold the required Human ID SBT."
    if outcome is Outcome.INVALID_ADDRESS:
        return f"That does not look like a wallet address. Example: `{verify} 0xYourWalletAddress`"

    if outcome is Outcome.NO_PENDING_CHALLENGE:
        return f"No verification request found. Start with `{verify} <wallet>` first."
    if outcome is Outcome.SIGNATURE_MISMATCH:
        return "Signature does not match the provided wallet."
    if outcome is Outcome.SIGNATURE_FORMAT:
        return "Error verifying signature. Make sure you signed the exact message provided."
    if outcome is Outcome.ROLE_NOT_FOUND:
        return f'Role "{result.detail or settings.ROLE_NAME}" not found. Please create it first.'
    if outcome is Outcome.VERIFIED:
        return f"Success! You have been given the {settings.ROLE_NAME} role."

    # Outcome.NETWORK_ERROR
    return "Something went wrong while talking to the network. Please try again later."
