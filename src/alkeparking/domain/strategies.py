# File: src/alkeparking/domain/strategies.py
"""
Strategy Pattern Implementation for AlkeParking pricing

This module encapsulates the fee algorithm behind a PricingStrategy interface
so the registry depends on the abstraction, not on the tariff itself.

Key Strategies:
1. StandardPricingStrategy - Base tax per category, 5 per started-and-completed
   15 minute block beyond the first two hours, 15% off with a discount card
"""

from abc import ABC, abstractmethod
import logging

from .models import VehicleCategory


# ============================================================================
# STRATEGY INTERFACES
# ============================================================================

class PricingStrategy(ABC):
    """
    Abstract base class for pricing strategies
    Implementations must be pure: no state is read or written while pricing
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def compute_fee(
        self,
        category: VehicleCategory,
        parked_minutes: int,
        has_discount_card: bool
    ) -> int:
        """
        Calculate the fee owed at check-out
        Returns: Integer fee
        """
        pass

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("PricingStrategy", "") or "Pricing"

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Pricing Strategy"


# ============================================================================
# PRICING STRATEGIES
# ============================================================================

class StandardPricingStrategy(PricingStrategy):
    """
    Standard tiered tariff
    - Flat base tax by vehicle category for the first free_minutes
    - block_fee for every full block_minutes block after that
    - Discount card holders pay the fee minus discount_rate, truncated
    """

    def __init__(
        self,
        free_minutes: int = 120,
        block_minutes: int = 15,
        block_fee: int = 5,
        discount_rate: float = 0.15
    ):
        super().__init__()
        if free_minutes < 0:
            raise ValueError("Free minutes cannot be negative")
        if block_minutes <= 0:
            raise ValueError("Block length must be positive")
        if block_fee < 0:
            raise ValueError("Block fee cannot be negative")
        if not 0 <= discount_rate < 1:
            raise ValueError(f"Discount rate must be in [0, 1), got {discount_rate}")

        self.free_minutes = free_minutes
        self.block_minutes = block_minutes
        self.block_fee = block_fee
        self.discount_rate = discount_rate

    def compute_fee(
        self,
        category: VehicleCategory,
        parked_minutes: int,
        has_discount_card: bool
    ) -> int:
        fee = category.base_tax

        if parked_minutes > self.free_minutes:
            excess_minutes = parked_minutes - self.free_minutes
            billable_blocks = excess_minutes // self.block_minutes
            fee += billable_blocks * self.block_fee

        if has_discount_card:
            # Truncation toward zero, not rounding: 15 -> 12.75 -> 12
            fee = int(fee - fee * self.discount_rate)

        self.logger.debug(
            f"Fee for {category} after {parked_minutes} min "
            f"(discount card: {has_discount_card}): {fee}"
        )
        return fee


_DEFAULT_STRATEGY = StandardPricingStrategy()


def compute_fee(category: VehicleCategory, parked_minutes: int, has_discount_card: bool) -> int:
    """Price a stay with the standard tariff"""
    return _DEFAULT_STRATEGY.compute_fee(category, parked_minutes, has_discount_card)
