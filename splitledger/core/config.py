from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DEBUG: bool = False

    # API Settings
    PROJECT_NAME: str = "SplitLedger API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared-expense ledger and settlement engine"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Money. All amounts are integer cents; a difference below
    # AMOUNT_TOLERANCE_CENTS is treated as zero.
    AMOUNT_TOLERANCE_CENTS: int = 1
    PERCENTAGE_TOLERANCE: Decimal = Decimal("0.01")

    # Re-check antisymmetry and conservation after every ledger mutation
    CHECK_INVARIANTS: bool = True

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
