# File: src/alkeparking/domain/aggregates.py
"""
Aggregate Roots for the AlkeParking registry
Following Domain-Driven Design (DDD) Aggregate Pattern

Aggregates:
1. VehicleRegistry - Root aggregate owning the parked vehicles and earnings

Key Concepts:
- The aggregate root enforces capacity and plate uniqueness
- Parked vehicles are only reachable through the root
- Domain events are raised for check-in and check-out
- Failures are reported as result values, never raised
"""

from typing import Any, Callable, Dict, List, Optional
from datetime import datetime, tzinfo
import uuid
import logging

from .models import (
    Vehicle, RegistryErrorKind, CheckInResult, CheckOutResult,
    RegistryStats, DomainEvent, VehicleCheckedInEvent,
    VehicleCheckedOutEvent, is_valid_plate
)
from .strategies import PricingStrategy, StandardPricingStrategy
from ..infrastructure.repositories import VehicleRepository, InMemoryVehicleRepository


DEFAULT_CAPACITY = 20


# ============================================================================
# BASE AGGREGATE ROOT
# ============================================================================

class AggregateRoot:
    """
    Base class for all aggregate roots
    Provides identity, domain event collection and versioning
    """

    def __init__(self, id: Optional[str] = None):
        self._id = id or str(uuid.uuid4())
        self._version: int = 1
        self._changes: List[DomainEvent] = []
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def id(self) -> str:
        return self._id

    @property
    def version(self) -> int:
        """Get current aggregate version"""
        return self._version

    def _increment_version(self) -> None:
        """Increment version after state change"""
        self._version += 1

    def _add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to the list of changes"""
        self._changes.append(event)
        self._logger.debug(f"Added domain event: {event.__class__.__name__}")

    def clear_events(self) -> List[DomainEvent]:
        """Clear and return all domain events"""
        events = self._changes.copy()
        self._changes.clear()
        return events

    @property
    def has_changes(self) -> bool:
        """Check if aggregate has pending domain events"""
        return len(self._changes) > 0

    def _validate_invariants(self) -> None:
        """Validate aggregate invariants - to be overridden by subclasses"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"


# ============================================================================
# VEHICLE REGISTRY AGGREGATE
# ============================================================================

class VehicleRegistry(AggregateRoot):
    """
    Aggregate Root: the set of currently parked vehicles
    Enforces the capacity ceiling and plate uniqueness, prices check-outs and
    keeps the running earnings. Not thread-safe; callers serialize access.
    """

    WELCOME_MESSAGE = "Welcome to AlkeParking"
    CHECK_IN_FAILED = "Sorry, the check-in failed"
    CHECK_OUT_FAILED = "Sorry, the check-out failed"

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        pricing_strategy: Optional[PricingStrategy] = None,
        repository: Optional[VehicleRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id: Optional[str] = None
    ):
        super().__init__(id)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._pricing = pricing_strategy or StandardPricingStrategy()
        self._vehicles = repository if repository is not None else InMemoryVehicleRepository()
        self._clock = clock

        # Statistics
        self._total_checked_out: int = 0
        self._total_earnings: int = 0

        self._validate_invariants()
        self._logger.info(f"Created VehicleRegistry (ID: {self.id}, capacity: {capacity})")

    def _validate_invariants(self) -> None:
        """Validate aggregate invariants"""
        # Invariant 1: Never more vehicles than the ceiling
        if self._vehicles.count() > self._capacity:
            raise ValueError(
                f"Registry holds {self._vehicles.count()} vehicles, "
                f"capacity is {self._capacity}"
            )

        # Invariant 2: Earnings only grow from zero
        if self._total_earnings < 0 or self._total_checked_out < 0:
            raise ValueError("Aggregate counters cannot be negative")

    # ========================================================================
    # PUBLIC BUSINESS METHODS
    # ========================================================================

    def check_in(self, vehicle: Vehicle) -> CheckInResult:
        """
        Admit a vehicle to the registry
        Checks capacity first, then plate uniqueness; inserts at most once.
        """
        if not is_valid_plate(vehicle.plate):
            self._logger.warning("Check-in rejected: empty plate")
            return CheckInResult(
                ok=False,
                message=f"{self.CHECK_IN_FAILED}: invalid plate",
                error=RegistryErrorKind.INVALID_PLATE
            )

        if self._vehicles.count() >= self._capacity:
            self._logger.warning(
                f"Check-in rejected for {vehicle.plate}: capacity exceeded "
                f"({self._capacity} vehicles parked)"
            )
            return CheckInResult(
                ok=False,
                message=f"{self.CHECK_IN_FAILED}: capacity exceeded",
                error=RegistryErrorKind.CAPACITY_EXCEEDED
            )

        if self._vehicles.exists(vehicle.plate):
            self._logger.warning(f"Check-in rejected for {vehicle.plate}: duplicate plate")
            return CheckInResult(
                ok=False,
                message=f"{self.CHECK_IN_FAILED}: duplicate plate",
                error=RegistryErrorKind.DUPLICATE_PLATE
            )

        self._vehicles.add(vehicle)
        self._increment_version()
        self._add_domain_event(
            VehicleCheckedInEvent(vehicle, self._now(vehicle))
        )

        self._logger.info(
            f"Vehicle {vehicle.plate} checked in "
            f"({self._vehicles.count()}/{self._capacity} spaces used)"
        )
        return CheckInResult(ok=True, message=self.WELCOME_MESSAGE)

    def check_out(self, plate: str) -> CheckOutResult:
        """
        Release a parked vehicle and collect its fee
        Parked time is measured at this call, never earlier.
        """
        if not is_valid_plate(plate):
            self._logger.warning("Check-out rejected: empty plate")
            return CheckOutResult(
                ok=False,
                message=f"{self.CHECK_OUT_FAILED}: invalid plate",
                error=RegistryErrorKind.INVALID_PLATE
            )

        vehicle = self._vehicles.get(plate)
        if vehicle is None:
            self._logger.warning(f"Check-out rejected for {plate}: not found")
            return CheckOutResult(
                ok=False,
                message=f"{self.CHECK_OUT_FAILED}: vehicle {plate} not found",
                error=RegistryErrorKind.NOT_FOUND
            )

        check_out_time = self._now(vehicle)
        parked_minutes = vehicle.parked_minutes(check_out_time)
        fee = self._pricing.compute_fee(
            vehicle.category,
            parked_minutes,
            vehicle.has_discount_card
        )

        self._vehicles.delete(plate)
        self._total_checked_out += 1
        self._total_earnings += fee
        self._increment_version()
        self._add_domain_event(
            VehicleCheckedOutEvent(vehicle, check_out_time, parked_minutes, fee)
        )

        self._logger.info(
            f"Vehicle {plate} checked out after {parked_minutes} min. Fee: ${fee}"
        )
        return CheckOutResult(
            ok=True,
            message=f"Your fee is ${fee}. Come back soon",
            fee=fee
        )

    # ========================================================================
    # QUERY METHODS (Read-only)
    # ========================================================================

    def get_aggregate_stats(self) -> RegistryStats:
        """Snapshot of (total_checked_out, total_earnings)"""
        return RegistryStats(
            total_checked_out=self._total_checked_out,
            total_earnings=self._total_earnings
        )

    def list_parked_plates(self) -> List[str]:
        """Plates of all parked vehicles, in no particular order"""
        return self._vehicles.list_plates()

    def get_vehicle(self, plate: str) -> Optional[Vehicle]:
        """Get a parked vehicle by plate"""
        return self._vehicles.get(plate)

    def is_parked(self, plate: str) -> bool:
        return self._vehicles.exists(plate)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def parked_count(self) -> int:
        return self._vehicles.count()

    @property
    def available_spaces(self) -> int:
        return self._capacity - self._vehicles.count()

    @property
    def is_full(self) -> bool:
        return self._vehicles.count() >= self._capacity

    @property
    def pricing_strategy(self) -> PricingStrategy:
        return self._pricing

    def get_status_report(self) -> Dict[str, Any]:
        """Get comprehensive status report"""
        return {
            "registry_id": self.id,
            "capacity": self._capacity,
            "occupancy": {
                "parked": self.parked_count,
                "available": self.available_spaces,
                "is_full": self.is_full,
            },
            "statistics": self.get_aggregate_stats().to_dict(),
            "pricing_strategy": str(self._pricing),
            "version": self.version,
        }

    # ========================================================================
    # INTERNAL HELPER METHODS
    # ========================================================================

    def now(self, tz: Optional[tzinfo] = None) -> datetime:
        """Current time from the injected clock, or the wall clock in tz"""
        if self._clock is not None:
            return self._clock()
        return datetime.now(tz)

    def _now(self, vehicle: Vehicle) -> datetime:
        return self.now(vehicle.check_in_time.tzinfo)

    def __len__(self) -> int:
        return self._vehicles.count()

    def __contains__(self, plate: object) -> bool:
        return isinstance(plate, str) and self._vehicles.exists(plate)
