# File: src/alkeparking/domain/models.py
"""
Domain Models for the AlkeParking registry
Following Domain-Driven Design (DDD) principles with rich domain models

This module contains:
1. Enums: Vehicle categories and registry error kinds
2. Entities: The parked Vehicle, identified by its plate
3. Result values: Outcomes returned by registry operations
4. Domain Events: Events representing check-in and check-out

All models include validation and business logic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any, Iterator
from datetime import datetime
from enum import Enum
import uuid


# ============================================================================
# ENUMS FOR DOMAIN TYPES
# ============================================================================

class VehicleCategory(Enum):
    """
    Enumeration of vehicle categories
    Each category carries the fixed base tax charged on check-out
    """
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    BUS = "bus"
    MINIBUS = "minibus"

    @property
    def base_tax(self) -> int:
        """Get the base tax for this category"""
        taxes = {
            VehicleCategory.BUS: 30,
            VehicleCategory.CAR: 20,
            VehicleCategory.MOTORCYCLE: 15,
            VehicleCategory.MINIBUS: 25,
        }
        return taxes[self]

    def __str__(self) -> str:
        """Human-readable string representation"""
        names = {
            VehicleCategory.CAR: "Car",
            VehicleCategory.MOTORCYCLE: "Motorcycle",
            VehicleCategory.BUS: "Bus",
            VehicleCategory.MINIBUS: "MiniBus",
        }
        return names[self]


class RegistryErrorKind(Enum):
    """
    Enumeration of the reasons a registry operation can fail
    None of them are fatal; they are reported through result values
    """
    CAPACITY_EXCEEDED = "capacity_exceeded"   # Lot already holds its ceiling
    DUPLICATE_PLATE = "duplicate_plate"       # Plate already parked
    NOT_FOUND = "not_found"                   # Plate not currently parked
    INVALID_PLATE = "invalid_plate"           # Empty or blank plate
    INVALID_REQUEST = "invalid_request"       # Malformed application-layer payload


# ============================================================================
# DOMAIN ENTITIES
# ============================================================================

class Vehicle:
    """
    Entity: A vehicle presented for parking
    The plate is the sole identity; two vehicles with the same plate are equal
    regardless of their other attributes.
    """

    __slots__ = ("_plate", "_category", "_check_in_time", "_discount_card_id")

    def __init__(
        self,
        plate: str,
        category: VehicleCategory,
        check_in_time: datetime,
        discount_card_id: Optional[str] = None
    ):
        if not isinstance(category, VehicleCategory):
            raise TypeError(f"category must be a VehicleCategory, got {type(category).__name__}")
        if not isinstance(check_in_time, datetime):
            raise TypeError("check_in_time must be a datetime")

        self._plate = plate
        self._category = category
        self._check_in_time = check_in_time
        self._discount_card_id = discount_card_id

    @property
    def plate(self) -> str:
        return self._plate

    @property
    def category(self) -> VehicleCategory:
        return self._category

    @property
    def check_in_time(self) -> datetime:
        return self._check_in_time

    @property
    def discount_card_id(self) -> Optional[str]:
        return self._discount_card_id

    @property
    def has_discount_card(self) -> bool:
        """Only the presence of a card matters, its value is not validated"""
        return self._discount_card_id is not None

    def parked_minutes(self, now: Optional[datetime] = None) -> int:
        """
        Whole minutes elapsed since check-in, as of ``now``
        Recomputed on every call; a check-in time in the future counts as zero.
        """
        if now is None:
            now = datetime.now(self._check_in_time.tzinfo)
        elapsed_seconds = (now - self._check_in_time).total_seconds()
        if elapsed_seconds <= 0:
            return 0
        return int(elapsed_seconds // 60)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "plate": self._plate,
            "category": self._category.value,
            "base_tax": self._category.base_tax,
            "check_in_time": self._check_in_time.isoformat(),
            "discount_card_id": self._discount_card_id,
        }

    def __eq__(self, other: object) -> bool:
        """Vehicles are equal if they share the same plate"""
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self._plate == other._plate

    def __hash__(self) -> int:
        return hash(self._plate)

    def __repr__(self) -> str:
        return f"Vehicle(plate={self._plate!r}, category={self._category.value})"

    def __str__(self) -> str:
        return f"{self._category} [{self._plate}]"


def is_valid_plate(plate: Any) -> bool:
    """A plate must be a non-blank string; case is preserved and significant"""
    return isinstance(plate, str) and bool(plate.strip())


# ============================================================================
# RESULT VALUES
# ============================================================================

@dataclass(frozen=True)
class CheckInResult:
    """Outcome of a check-in attempt"""
    ok: bool
    message: str
    error: Optional[RegistryErrorKind] = None


@dataclass(frozen=True)
class CheckOutResult:
    """Outcome of a check-out attempt; fee is only set on success"""
    ok: bool
    message: str
    fee: Optional[int] = None
    error: Optional[RegistryErrorKind] = None


@dataclass(frozen=True)
class RegistryStats:
    """Snapshot of the registry's running aggregates"""
    total_checked_out: int = 0
    total_earnings: int = 0

    def __iter__(self) -> Iterator[int]:
        # Allows ``checked_out, earnings = registry.get_aggregate_stats()``
        yield self.total_checked_out
        yield self.total_earnings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_checked_out": self.total_checked_out,
            "total_earnings": self.total_earnings,
        }

    def __str__(self) -> str:
        return (
            f"{self.total_checked_out} vehicles have checked out "
            f"and have earnings of ${self.total_earnings}"
        )


# ============================================================================
# DOMAIN EVENTS (for event-driven architecture)
# ============================================================================

class DomainEvent(ABC):
    """
    Base class for all domain events
    Events represent something that happened in the domain
    """

    def __init__(self, timestamp: Optional[datetime] = None):
        self.event_id = str(uuid.uuid4())
        self.timestamp = timestamp or datetime.now()
        self.version = "1.0"

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization"""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__} at {self.timestamp}"


class VehicleCheckedInEvent(DomainEvent):
    """Event raised when a vehicle is admitted to the registry"""

    def __init__(self, vehicle: Vehicle, timestamp: Optional[datetime] = None):
        super().__init__(timestamp)
        self.plate = vehicle.plate
        self.category = vehicle.category
        self.check_in_time = vehicle.check_in_time
        self.has_discount_card = vehicle.has_discount_card

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": "vehicle.checked_in",
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "data": {
                "plate": self.plate,
                "category": self.category.value,
                "check_in_time": self.check_in_time.isoformat(),
                "has_discount_card": self.has_discount_card
            }
        }


class VehicleCheckedOutEvent(DomainEvent):
    """Event raised when a vehicle leaves and its fee is collected"""

    def __init__(
        self,
        vehicle: Vehicle,
        check_out_time: datetime,
        parked_minutes: int,
        fee: int
    ):
        super().__init__(check_out_time)
        self.plate = vehicle.plate
        self.category = vehicle.category
        self.check_in_time = vehicle.check_in_time
        self.check_out_time = check_out_time
        self.parked_minutes = parked_minutes
        self.fee = fee

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": "vehicle.checked_out",
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "data": {
                "plate": self.plate,
                "category": self.category.value,
                "check_in_time": self.check_in_time.isoformat(),
                "check_out_time": self.check_out_time.isoformat(),
                "parked_minutes": self.parked_minutes,
                "fee": self.fee
            }
        }
