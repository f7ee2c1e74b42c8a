# File: src/alkeparking/infrastructure/repositories.py
"""
Repository Pattern Implementation for AlkeParking

Repositories provide a collection-like interface over the vehicles currently
parked in a registry, abstracting how they are stored.

Storage Implementations:
- InMemoryVehicleRepository - Plate-keyed dictionary, the only store the
  registry needs since nothing outlives the process
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, List, Dict
import logging

from ..domain.models import Vehicle

# Type variables for generic repositories
T = TypeVar('T')  # Entity type
ID = TypeVar('ID')  # ID type


# ============================================================================
# REPOSITORY INTERFACES
# ============================================================================

class Repository(ABC, Generic[T, ID]):
    """Generic repository interface"""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Add a new entity"""
        pass

    @abstractmethod
    def get(self, id: ID) -> Optional[T]:
        """Get entity by ID"""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all entities"""
        pass

    @abstractmethod
    def delete(self, id: ID) -> bool:
        """Delete entity by ID"""
        pass

    @abstractmethod
    def exists(self, id: ID) -> bool:
        """Check if entity exists"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count entities"""
        pass


class VehicleRepository(Repository[Vehicle, str], ABC):
    """Repository of parked vehicles, identified by plate"""

    def list_plates(self) -> List[str]:
        """Get plates of all stored vehicles"""
        return [vehicle.plate for vehicle in self.get_all()]


# ============================================================================
# IN-MEMORY REPOSITORIES
# ============================================================================

class InMemoryVehicleRepository(VehicleRepository):
    """In-memory vehicle store keyed by exact, case-sensitive plate"""

    def __init__(self):
        self._storage: Dict[str, Vehicle] = {}
        self._logger = logging.getLogger(self.__class__.__name__)

    def add(self, entity: Vehicle) -> Vehicle:
        if entity.plate in self._storage:
            raise KeyError(f"Vehicle {entity.plate} already stored")

        self._storage[entity.plate] = entity
        self._logger.debug(f"Added vehicle {entity.plate}")
        return entity

    def get(self, id: str) -> Optional[Vehicle]:
        return self._storage.get(id)

    def get_all(self) -> List[Vehicle]:
        return list(self._storage.values())

    def delete(self, id: str) -> bool:
        if id in self._storage:
            del self._storage[id]
            self._logger.debug(f"Deleted vehicle {id}")
            return True
        return False

    def exists(self, id: str) -> bool:
        return id in self._storage

    def count(self) -> int:
        return len(self._storage)

    def list_plates(self) -> List[str]:
        return list(self._storage)
