"""Allocation engine.

Slots make up levels and levels make up the garage. The garage is the
single owner of occupancy and of the parked-machine index.
"""

from pygarage.engine.garage import Garage, ParkingRecord
from pygarage.engine.level import Level
from pygarage.engine.slot import Slot

__all__ = ["Garage", "Level", "ParkingRecord", "Slot"]
