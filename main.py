#!/usr/bin/env python3
import sys
from rich.console import Console
from rich.markup import escape
from config.logging_config import configure
from config.app_config import settings
from smart_building.controller import BuildingController
from smart_building.managers import SimulatedDoorManager, SimulatedLightManager, SimulatedFireAlarmManager
from smart_building.services import FrappeService, FrappeWebService, FrappeEmailService

def build_controller() -> BuildingController:
    web = email = None
    if settings.FRAPPE_URL:
        frappe = FrappeService(settings.FRAPPE_URL, settings.FRAPPE_USER, settings.FRAPPE_PWD)
        web    = FrappeWebService(frappe, settings.BUILDING_ID.lower())
        email  = FrappeEmailService(frappe)
    return BuildingController.with_managers(
        settings.BUILDING_ID,
        door_manager=SimulatedDoorManager(),
        light_manager=SimulatedLightManager(),
        fire_alarm_manager=SimulatedFireAlarmManager(),
        web_service=web,
        email_service=email,
    )

def main(argv):
    configure()
    console    = Console()
    controller = build_controller()
    console.print(f"building [bold]{controller.get_building_id()}[/] is {controller.get_current_state()!r}")
    for tag in argv:
        ok = controller.set_current_state(tag)
        colour = "green" if ok else "red"
        console.print(f"[{colour}]{escape(repr(tag))} -> {ok}[/] (now {controller.get_current_state()!r})")
    console.print(controller.get_status_report(), markup=False)

if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except KeyboardInterrupt:
        sys.exit("graceful shutdown")
