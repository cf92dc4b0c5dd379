# smart_building/managers/base.py
from abc import ABC, abstractmethod
from typing import List

OK = "OK"
FAULT = "FAULT"

class Manager(ABC):
    """Abstract base class for every device manager.

    A manager's status is its device-type label followed by one
    comma-terminated entry per device, e.g. ``Doors,OK,FAULT,``.
    """

    device_type: str = ""

    @abstractmethod
    def get_status(self) -> str:
        """Return the status string for all managed devices"""
        pass

    @staticmethod
    def format_status(device_type: str, statuses: List[str]) -> str:
        return f"{device_type}," + "".join(f"{s}," for s in statuses)

class DoorManager(Manager):
    device_type = "Doors"

    @abstractmethod
    def open_door(self, door_id: int) -> bool:
        pass

    @abstractmethod
    def lock_door(self, door_id: int) -> bool:
        pass

    @abstractmethod
    def open_all_doors(self) -> bool:
        """Open every door; True only when all of them opened"""
        pass

    @abstractmethod
    def lock_all_doors(self) -> bool:
        pass

class LightManager(Manager):
    device_type = "Lights"

    @abstractmethod
    def set_light(self, is_on: bool, light_id: int) -> None:
        pass

    @abstractmethod
    def set_all_lights(self, is_on: bool) -> None:
        pass

class FireAlarmManager(Manager):
    device_type = "FireAlarm"
