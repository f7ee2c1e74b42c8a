# File: src/alkeparking/application/parking_service.py
"""
AlkeParking Application Service

This module implements the application service layer. It turns raw caller
input into domain values, delegates to the VehicleRegistry aggregate and
returns DTOs.

Responsibilities:
1. Validate and convert check-in requests
2. Execute check-in/check-out use cases against one registry
3. Expose read-only snapshots (stats, parked plates)

No exception crosses this boundary for invalid input or registry failures;
every outcome is a response DTO with a success flag.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from datetime import datetime
import logging

from pydantic import ValidationError

from ..config import ParkingSettings
from ..domain.models import Vehicle, VehicleCategory, RegistryErrorKind, DomainEvent
from ..domain.aggregates import VehicleRegistry
from ..domain.strategies import StandardPricingStrategy
from .dtos import (
    CheckInRequestDTO, CheckInResponseDTO, CheckOutResponseDTO,
    RegistryStatsDTO, ParkedVehiclesDTO
)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ParkingServiceError(Exception):
    """Base exception for parking service errors"""

    def __init__(self, message: str, kind: RegistryErrorKind = RegistryErrorKind.INVALID_REQUEST):
        super().__init__(message)
        self.kind = kind


class VehicleValidationError(ParkingServiceError):
    """Exception for vehicle validation errors"""
    pass


# ============================================================================
# MAIN PARKING SERVICE
# ============================================================================

class ParkingService:
    """
    Application service for a single parking registry

    The service owns no global state: callers construct it (optionally around
    an existing registry) and are responsible for serializing access to it.
    Domain events raised by each use case are drained from the registry and
    handed to the event handler, if one is given.
    """

    def __init__(
        self,
        registry: Optional[VehicleRegistry] = None,
        event_handler: Optional[Callable[[DomainEvent], None]] = None
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.registry = registry if registry is not None else VehicleRegistry()
        self.event_handler = event_handler
        self.logger.info("ParkingService initialized")

    @classmethod
    def from_settings(cls, settings: Optional[ParkingSettings] = None) -> 'ParkingService':
        """Build a service whose registry follows the given settings"""
        settings = settings or ParkingSettings()
        pricing = StandardPricingStrategy(
            free_minutes=settings.free_minutes,
            block_minutes=settings.block_minutes,
            block_fee=settings.block_fee,
            discount_rate=settings.discount_rate
        )
        return cls(VehicleRegistry(capacity=settings.capacity, pricing_strategy=pricing))

    # ========================================================================
    # USE CASES
    # ========================================================================

    def check_in(self, request: Union[CheckInRequestDTO, Dict[str, Any]]) -> CheckInResponseDTO:
        """Check a vehicle in from a request DTO or a raw payload"""
        plate = request.get("plate") if isinstance(request, dict) else request.plate

        try:
            vehicle = self._to_vehicle(request)
        except ParkingServiceError as e:
            self.logger.warning(f"Invalid check-in request for {plate!r}: {e}")
            return CheckInResponseDTO(
                success=False,
                message=str(e),
                plate=plate if isinstance(plate, str) else None,
                error_code=e.kind.value
            )

        result = self.registry.check_in(vehicle)
        self._publish_events()
        return CheckInResponseDTO(
            success=result.ok,
            message=result.message,
            plate=vehicle.plate,
            error_code=result.error.value if result.error else None
        )

    def check_out(self, plate: str) -> CheckOutResponseDTO:
        """Check a vehicle out by plate"""
        if not isinstance(plate, str):
            return CheckOutResponseDTO(
                success=False,
                message=f"{VehicleRegistry.CHECK_OUT_FAILED}: invalid plate",
                error_code=RegistryErrorKind.INVALID_PLATE.value
            )

        result = self.registry.check_out(plate)
        self._publish_events()
        return CheckOutResponseDTO(
            success=result.ok,
            message=result.message,
            plate=plate,
            fee=result.fee,
            error_code=result.error.value if result.error else None
        )

    def get_stats(self) -> RegistryStatsDTO:
        """Aggregate earnings and occupancy snapshot"""
        stats = self.registry.get_aggregate_stats()
        return RegistryStatsDTO(
            total_checked_out=stats.total_checked_out,
            total_earnings=stats.total_earnings,
            parked=self.registry.parked_count,
            capacity=self.registry.capacity
        )

    def list_parked(self) -> ParkedVehiclesDTO:
        """Plates currently parked"""
        plates = self.registry.list_parked_plates()
        return ParkedVehiclesDTO(plates=plates, count=len(plates))

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _to_vehicle(self, request: Union[CheckInRequestDTO, Dict[str, Any]]) -> Vehicle:
        """Convert a request into a Vehicle, raising VehicleValidationError"""
        if isinstance(request, dict):
            try:
                request = CheckInRequestDTO.model_validate(request)
            except ValidationError as e:
                raise self._translate_validation_error(e) from e

        return Vehicle(
            plate=request.plate,
            category=VehicleCategory(request.category),
            check_in_time=self._check_in_time(request.check_in_time),
            discount_card_id=request.discount_card_id
        )

    @staticmethod
    def _translate_validation_error(error: ValidationError) -> VehicleValidationError:
        """Map pydantic errors onto registry error kinds"""
        details = error.errors()
        fields = {str(item["loc"][0]) for item in details if item.get("loc")}
        kind = (
            RegistryErrorKind.INVALID_PLATE if "plate" in fields
            else RegistryErrorKind.INVALID_REQUEST
        )
        summary = "; ".join(
            f"{'.'.join(str(part) for part in item.get('loc', ()))}: {item.get('msg')}"
            for item in details
        )
        return VehicleValidationError(f"Invalid check-in request ({summary})", kind)

    def _check_in_time(self, requested: Optional[datetime]) -> datetime:
        """Arrival time on the registry's clock; naive and aware times never mix"""
        if requested is None:
            return self.registry.now()

        reference = self.registry.now(requested.tzinfo)
        if _is_aware(requested) != _is_aware(reference):
            raise VehicleValidationError(
                f"Invalid check-in request (check_in_time: expected a "
                f"{'timezone-aware' if _is_aware(reference) else 'naive'} datetime)"
            )
        return requested

    def _publish_events(self) -> List[DomainEvent]:
        events = self.registry.clear_events()
        for event in events:
            self.logger.debug(f"Domain event: {event}")
            if self.event_handler is not None:
                self.event_handler(event)
        return events


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None
