# File: src/alkeparking/config.py
"""
Configuration for AlkeParking

Settings are read from ALKEPARKING_* environment variables (or a .env file)
and fall back to the standard tariff and a 20-vehicle lot.
"""

import logging
import sys
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ParkingSettings(BaseSettings):
    """Registry and tariff settings"""

    model_config = SettingsConfigDict(
        env_prefix="ALKEPARKING_",
        env_file=".env",
        extra="ignore"
    )

    capacity: int = Field(default=20, gt=0, description="Maximum parked vehicles")
    free_minutes: int = Field(default=120, ge=0, description="Minutes covered by the base tax")
    block_minutes: int = Field(default=15, gt=0, description="Length of a billable block")
    block_fee: int = Field(default=5, ge=0, description="Charge per full block")
    discount_rate: float = Field(default=0.15, ge=0, lt=1, description="Discount card reduction")
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {v}")
        return level


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Setup application logging configuration"""
    logging.basicConfig(
        level=level or ParkingSettings().log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger("alkeparking")
