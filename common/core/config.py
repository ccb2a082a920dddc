from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import LedgerProviderType, ClockProviderType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    debug: bool = False  # Forces DEBUG logging regardless of log_level
    log_level: str = "INFO"

    # Billing Engine
    engine_address: str = "billing-engine"  # Spender identity used with the ledger
    ledger_provider: LedgerProviderType = LedgerProviderType.IN_MEMORY
    clock_provider: ClockProviderType = ClockProviderType.SYSTEM

    # OpenTelemetry
    otel_service_name: str = "recurring-billing"
    otel_service_version: str = "0.1.0"

    # Axiom (exporters are only attached when a token is set)
    axiom_token: Optional[str] = None
    axiom_dataset: Optional[str] = None

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @property
    def telemetry_export_enabled(self) -> bool:
        """Export spans and logs only when Axiom is fully configured."""
        return bool(self.axiom_token and self.axiom_dataset)


settings = Settings()
