import os
from pydantic_settings import BaseSettings, SettingsConfigDict

from humanid_gate.utils.address import is_valid_address, to_checksum


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Human ID Gate"
    LOG_LEVEL: str = "INFO"

    # Discord
    BOT_TOKEN: str = ""
    ROLE_NAME: str = "Human ID verified"
    VERIFY_COMMAND: str = "!verify"
    SIGNATURE_COMMAND: str = "!signature"

    # On-chain (Human ID SBT lives on Optimism)
    OPTIMISM_RPC_URL: str = os.getenv("OPTIMISM_RPC_URL", "https://mainnet.optimism.io")
    SBT_CONTRACT_ADDRESS: str = "0x2AA822e264F8cc31A2b9C22f39e5551241e94DfB"
    RPC_TIMEOUT_SECONDS: float = 15

    # Debug API
    DEBUG_API_ENABLED: bool = True
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # Load .env file
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # ---------- Helpers ----------

    def bot_configured(self) -> bool:
        return bool(self.BOT_TOKEN.strip())


def build_settings(**overrides) -> Settings:
    s = Settings(**overrides)

    if not is_valid_address(s.SBT_CONTRACT_ADDRESS):
        raise ValueError(f"SBT_CONTRACT_ADDRESS is not a valid address: {s.SBT_CONTRACT_ADDRESS!r}")
    s.SBT_CONTRACT_ADDRESS = to_checksum(s.SBT_CONTRACT_ADDRESS)

    s.LOG_LEVEL = s.LOG_LEVEL.strip().upper() or "INFO"
    s.BOT_TOKEN = s.BOT_TOKEN.strip()

    return s


settings = build_settings()
