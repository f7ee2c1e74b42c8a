# File: src/alkeparking/application/dtos.py
"""
Data Transfer Objects (DTOs) for AlkeParking

This module defines DTOs for data crossing the application boundary:
1. Input DTOs - Check-in requests from callers
2. Output DTOs - Check-in/check-out outcomes and registry snapshots

DTO Principles:
- Validation at creation
- No business logic, only data
- Serialization/deserialization support
"""

from typing import Dict, List, Optional, Any
from datetime import datetime
from enum import Enum
import json

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.models import VehicleCategory


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        data = self.model_dump(**kwargs)
        if exclude_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """Create DTO from dictionary"""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        data = json.loads(json_str)
        return cls(**data)


# ============================================================================
# ENUM DTOs
# ============================================================================

class VehicleCategoryDTO(str, Enum):
    """Vehicle category DTO"""
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    BUS = "bus"
    MINIBUS = "minibus"


# ============================================================================
# REQUEST DTOs
# ============================================================================

class CheckInRequestDTO(BaseDTO):
    """DTO for checking a vehicle in"""
    plate: str = Field(description="License plate, matched exactly and case-sensitively")
    category: VehicleCategoryDTO = Field(description="Vehicle category")
    check_in_time: Optional[datetime] = Field(default=None, description="Arrival time, defaults to now")
    discount_card_id: Optional[str] = Field(default=None, description="Discount card identifier")

    @field_validator('plate')
    @classmethod
    def validate_plate(cls, v: str) -> str:
        """Plates must not be blank; the value itself is kept verbatim"""
        if not v.strip():
            raise ValueError("License plate cannot be empty")
        return v

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v: Any) -> Any:
        if isinstance(v, VehicleCategory):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ============================================================================
# RESPONSE DTOs
# ============================================================================

class CheckInResponseDTO(BaseDTO):
    """DTO for check-in outcomes"""
    success: bool = Field(description="Success flag")
    message: str = Field(description="Human-readable outcome")
    plate: Optional[str] = Field(default=None, description="Plate that was presented")
    error_code: Optional[str] = Field(default=None, description="Failure kind")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class CheckOutResponseDTO(BaseDTO):
    """DTO for check-out outcomes"""
    success: bool = Field(description="Success flag")
    message: str = Field(description="Human-readable outcome")
    plate: Optional[str] = Field(default=None, description="Plate that was presented")
    fee: Optional[int] = Field(default=None, ge=0, description="Fee collected, set on success only")
    error_code: Optional[str] = Field(default=None, description="Failure kind")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class RegistryStatsDTO(BaseDTO):
    """DTO for aggregate earnings and occupancy"""
    total_checked_out: int = Field(ge=0, description="Vehicles checked out so far")
    total_earnings: int = Field(ge=0, description="Sum of collected fees")
    parked: int = Field(ge=0, description="Vehicles currently parked")
    capacity: int = Field(gt=0, description="Maximum parked vehicles")


class ParkedVehiclesDTO(BaseDTO):
    """DTO listing currently parked plates"""
    plates: List[str] = Field(default_factory=list, description="Parked plates, unordered")
    count: int = Field(ge=0, description="Number of parked vehicles")
