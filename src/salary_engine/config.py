"""Configuration management for the salary engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

from salary_engine.calculators.tax_tables import SSNIT_2024_RATES
from salary_engine.calculators.types import ContributionRates


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    currency_code: str
    ssnit_employee_rate: Decimal
    ssnit_employer_tier1_rate: Decimal
    ssnit_employer_tier2_rate: Decimal

    def __post_init__(self) -> None:
        # Out-of-range SSNIT overrides fail at load time
        ContributionRates(
            employee=self.ssnit_employee_rate,
            employer_tier1=self.ssnit_employer_tier1_rate,
            employer_tier2=self.ssnit_employer_tier2_rate,
        )

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    @property
    def contribution_rates(self) -> ContributionRates:
        return ContributionRates(
            employee=self.ssnit_employee_rate,
            employer_tier1=self.ssnit_employer_tier1_rate,
            employer_tier2=self.ssnit_employer_tier2_rate,
        )

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            currency_code=os.getenv("CURRENCY_CODE", "GHS"),
            ssnit_employee_rate=Decimal(
                os.getenv("SSNIT_EMPLOYEE_RATE", str(SSNIT_2024_RATES.employee))
            ),
            ssnit_employer_tier1_rate=Decimal(
                os.getenv("SSNIT_EMPLOYER_TIER1_RATE", str(SSNIT_2024_RATES.employer_tier1))
            ),
            ssnit_employer_tier2_rate=Decimal(
                os.getenv("SSNIT_EMPLOYER_TIER2_RATE", str(SSNIT_2024_RATES.employer_tier2))
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
