"""Deterministic fakes for the controller's collaborators."""

from __future__ import annotations

from typing import Any

import pytest

from smart_building.controller import BuildingController
from smart_building.managers.base import DoorManager, FireAlarmManager, LightManager
from smart_building.services.base import EmailService, WebService


class FakeDoorManager(DoorManager):
    def __init__(self, status: str = "Doors,OK,OK,", open_result: bool = True, lock_result: bool = True) -> None:
        self.status = status
        self.open_result = open_result
        self.lock_result = lock_result
        self.calls: list[tuple[Any, ...]] = []

    def open_door(self, door_id: int) -> bool:
        self.calls.append(("open_door", door_id))
        return self.open_result

    def lock_door(self, door_id: int) -> bool:
        self.calls.append(("lock_door", door_id))
        return self.lock_result

    def open_all_doors(self) -> bool:
        self.calls.append(("open_all_doors",))
        return self.open_result

    def lock_all_doors(self) -> bool:
        self.calls.append(("lock_all_doors",))
        return self.lock_result

    def get_status(self) -> str:
        return self.status


class FakeLightManager(LightManager):
    def __init__(self, status: str = "Lights,OK,OK,") -> None:
        self.status = status
        self.calls: list[tuple[Any, ...]] = []

    def set_light(self, is_on: bool, light_id: int) -> None:
        self.calls.append(("set_light", is_on, light_id))

    def set_all_lights(self, is_on: bool) -> None:
        self.calls.append(("set_all_lights", is_on))

    def get_status(self) -> str:
        return self.status


class FakeFireAlarmManager(FireAlarmManager):
    def __init__(self, status: str = "FireAlarm,OK,OK,") -> None:
        self.status = status

    def get_status(self) -> str:
        return self.status


class FakeWebService(WebService):
    def __init__(self, fire_alarm_error: Exception | None = None) -> None:
        self.fire_alarm_error = fire_alarm_error
        self.fire_alarms: list[str] = []
        self.engineer_requests: list[str] = []

    def log_fire_alarm(self, alarm_type: str) -> None:
        self.fire_alarms.append(alarm_type)
        if self.fire_alarm_error is not None:
            raise self.fire_alarm_error

    def log_engineer_required(self, log_details: str) -> None:
        self.engineer_requests.append(log_details)


class FakeEmailService(EmailService):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def send_email(self, email_address: str, subject: str, message: str) -> None:
        self.sent.append((email_address, subject, message))


@pytest.fixture
def doors() -> FakeDoorManager:
    return FakeDoorManager()


@pytest.fixture
def lights() -> FakeLightManager:
    return FakeLightManager()


@pytest.fixture
def fire_alarm() -> FakeFireAlarmManager:
    return FakeFireAlarmManager()


@pytest.fixture
def web() -> FakeWebService:
    return FakeWebService()


@pytest.fixture
def email() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def wired_controller(doors, lights, fire_alarm, web, email) -> BuildingController:
    return BuildingController.with_managers("B123", doors, lights, fire_alarm, web, email)
