"""AlkeParking: capacity-bounded vehicle parking registry"""

from .domain.models import (
    VehicleCategory, Vehicle, RegistryErrorKind,
    CheckInResult, CheckOutResult, RegistryStats
)
from .domain.strategies import PricingStrategy, StandardPricingStrategy, compute_fee
from .domain.aggregates import VehicleRegistry, DEFAULT_CAPACITY

__version__ = "1.0.0"

__all__ = [
    "VehicleCategory", "Vehicle", "RegistryErrorKind",
    "CheckInResult", "CheckOutResult", "RegistryStats",
    "PricingStrategy", "StandardPricingStrategy", "compute_fee",
    "VehicleRegistry", "DEFAULT_CAPACITY",
]
