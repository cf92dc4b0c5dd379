"""
In-memory device managers.

They stand in for the real door, light and fire-alarm hardware when the
controller runs on a workstation: every device has a position (open/locked,
on/off) and can be flagged faulty, in which case it reports ``FAULT`` and
refuses commands.
"""

import logging
from typing import List, Set

from .base import DoorManager, LightManager, FireAlarmManager, OK, FAULT


class _DeviceBank:
    """Fault bookkeeping shared by the simulated managers."""

    def __init__(self, count: int):
        if count < 0:
            raise ValueError("device count cannot be negative")
        self.count = count
        self.faulty: Set[int] = set()
        self.logger = logging.getLogger(self.__class__.__name__)

    def valid(self, device_id: int) -> bool:
        return 0 <= device_id < self.count

    def healthy(self, device_id: int) -> bool:
        return self.valid(device_id) and device_id not in self.faulty

    def mark_faulty(self, device_id: int) -> None:
        if not self.valid(device_id):
            raise IndexError(f"no device with id {device_id}")
        self.faulty.add(device_id)
        self.logger.warning(f"{self.__class__.__name__}: device {device_id} flagged FAULT")

    def clear_fault(self, device_id: int) -> None:
        self.faulty.discard(device_id)

    def statuses(self) -> List[str]:
        return [FAULT if i in self.faulty else OK for i in range(self.count)]


class SimulatedDoorManager(_DeviceBank, DoorManager):
    def __init__(self, door_count: int = 8):
        super().__init__(door_count)
        self.open_doors: Set[int] = set()

    def open_door(self, door_id: int) -> bool:
        if not self.healthy(door_id):
            return False
        self.open_doors.add(door_id)
        return True

    def lock_door(self, door_id: int) -> bool:
        if not self.healthy(door_id):
            return False
        self.open_doors.discard(door_id)
        return True

    def open_all_doors(self) -> bool:
        results = [self.open_door(i) for i in range(self.count)]
        return all(results)

    def lock_all_doors(self) -> bool:
        results = [self.lock_door(i) for i in range(self.count)]
        return all(results)

    def is_open(self, door_id: int) -> bool:
        return door_id in self.open_doors

    def get_status(self) -> str:
        return self.format_status(self.device_type, self.statuses())


class SimulatedLightManager(_DeviceBank, LightManager):
    def __init__(self, light_count: int = 10):
        super().__init__(light_count)
        self.lit: Set[int] = set()

    def set_light(self, is_on: bool, light_id: int) -> None:
        if not self.healthy(light_id):
            self.logger.debug(f"light {light_id} ignored set_light({is_on})")
            return
        if is_on:
            self.lit.add(light_id)
        else:
            self.lit.discard(light_id)

    def set_all_lights(self, is_on: bool) -> None:
        for i in range(self.count):
            self.set_light(is_on, i)

    def is_on(self, light_id: int) -> bool:
        return light_id in self.lit

    def get_status(self) -> str:
        return self.format_status(self.device_type, self.statuses())


class SimulatedFireAlarmManager(_DeviceBank, FireAlarmManager):
    def __init__(self, sensor_count: int = 8):
        super().__init__(sensor_count)

    def get_status(self) -> str:
        return self.format_status(self.device_type, self.statuses())
