"""Shared fixtures for unit and integration tests"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from alkeparking.domain.models import Vehicle, VehicleCategory


T0 = datetime(2024, 1, 15, 10, 0)


class FakeClock:
    """Callable clock whose time only moves when told to"""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_vehicle(plate="AA111AA", category=VehicleCategory.CAR, check_in_time=T0, discount_card_id=None):
    return Vehicle(plate, category, check_in_time, discount_card_id)
