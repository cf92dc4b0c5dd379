"""Status aggregation and fault detection."""

from __future__ import annotations

import pytest

from smart_building.controller import BuildingController, detect_faults

from .conftest import FakeDoorManager, FakeFireAlarmManager, FakeLightManager, FakeWebService


class TestDetectFaults:
    @pytest.mark.parametrize(
        "lights, doors, fire, expected",
        [
            ("Lights,OK,", "Doors,OK,", "FireAlarm,OK,", ""),
            ("Lights,FAULT,", "Doors,OK,", "FireAlarm,OK,", "Lights,"),
            ("Lights,OK,", "Doors,FAULT,", "FireAlarm,OK,", "Doors,"),
            ("Lights,OK,", "Doors,OK,", "FireAlarm,FAULT,", "FireAlarm,"),
            ("Lights,FAULT,", "Doors,FAULT,", "FireAlarm,OK,", "Lights,Doors,"),
            ("Lights,OK,", "Doors,FAULT,", "FireAlarm,FAULT,", "Doors,FireAlarm,"),
            ("Lights,FAULT,", "Doors,FAULT,", "FireAlarm,FAULT,", "Lights,Doors,FireAlarm,"),
            ("Lights,FAULT,", "Doors,OK,", "FireAlarm,FAULT,", "Lights,FireAlarm,"),
        ],
    )
    def test_fault_summary(self, lights: str, doors: str, fire: str, expected: str) -> None:
        assert detect_faults(lights, doors, fire) == expected

    def test_empty_inputs(self) -> None:
        assert detect_faults("", "", "") == ""

    def test_marker_is_case_sensitive(self) -> None:
        assert detect_faults("Lights,fault,", "", "") == ""


class TestStatusReport:
    def test_report_is_plain_concatenation(self) -> None:
        lights = FakeLightManager("Lights,OK,OK,FAULT,OK,OK,OK,OK,OK,OK,OK,")
        doors = FakeDoorManager("Doors,OK,OK,OK,OK,OK,OK,OK,OK,")
        fire = FakeFireAlarmManager("FireAlarm,OK,OK,OK,OK,OK,OK,OK,OK,")
        controller = BuildingController.with_managers("23", doors, lights, fire, FakeWebService(), None)
        assert controller.get_status_report() == (
            "Lights,OK,OK,FAULT,OK,OK,OK,OK,OK,OK,OK,"
            "Doors,OK,OK,OK,OK,OK,OK,OK,OK,"
            "FireAlarm,OK,OK,OK,OK,OK,OK,OK,OK,"
        )

    def test_faults_reported_to_web_service(self, wired_controller, doors, fire_alarm, web) -> None:
        doors.status = "Doors,OK,FAULT,"
        fire_alarm.status = "FireAlarm,FAULT,"
        wired_controller.get_status_report()
        assert web.engineer_requests == ["Doors,FireAlarm,"]

    def test_no_faults_no_engineer_request(self, wired_controller, web) -> None:
        wired_controller.get_status_report()
        assert web.engineer_requests == []

    def test_engineer_request_failure_propagates(self, wired_controller, lights) -> None:
        class BrokenWeb(FakeWebService):
            def log_engineer_required(self, log_details: str) -> None:
                raise ConnectionError("backend unreachable")

        lights.status = "Lights,FAULT,"
        wired_controller.web_service = BrokenWeb()
        with pytest.raises(ConnectionError):
            wired_controller.get_status_report()

    def test_missing_managers_contribute_nothing(self) -> None:
        controller = BuildingController.with_managers(
            "B1", None, FakeLightManager("Lights,FAULT,"), None, None, None
        )
        assert controller.get_status_report() == "Lights,FAULT,"
