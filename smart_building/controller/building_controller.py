"""Building state controller: transitions, device actions and status reporting."""
from __future__ import annotations
import logging
import threading
from typing import Optional

from smart_building.core.exceptions import InvalidIdentityError, InvalidStartStateError
from smart_building.core.patterns.state_machine import BuildingState, BuildingStateMachine
from smart_building.managers.base import DoorManager, LightManager, FireAlarmManager
from smart_building.services.base import WebService, EmailService
from .fault_detection import detect_faults

ALARM_LOG_FAILURE_RECIPIENT = "smartbuilding@uclan.ac.uk"
ALARM_LOG_FAILURE_SUBJECT   = "failed to log alarm"
CLOSE_COMMAND               = "close"

_UNSET = object()


class BuildingController:
    """
    Tracks a building's operating state and drives its doors and lights.

    Rejected transitions are reported through the boolean result of
    ``set_current_state``; only invalid construction arguments raise.
    Collaborators are optional and every action checks that the one it
    needs was supplied.
    """

    def __init__(self,
                 building_id: str,
                 start_state=_UNSET,
                 *,
                 door_manager: Optional[DoorManager] = None,
                 light_manager: Optional[LightManager] = None,
                 fire_alarm_manager: Optional[FireAlarmManager] = None,
                 web_service: Optional[WebService] = None,
                 email_service: Optional[EmailService] = None):
        self.log   = logging.getLogger(self.__class__.__name__)
        self._lock = threading.RLock()
        self.set_building_id(building_id)

        if start_state is _UNSET:
            initial = BuildingState.OUT_OF_HOURS
        else:
            initial = BuildingState.parse(start_state)
            if initial is None or not initial.is_normal:
                raise InvalidStartStateError()
        self._machine = BuildingStateMachine(initial)

        self.door_manager       = door_manager
        self.light_manager      = light_manager
        self.fire_alarm_manager = fire_alarm_manager
        self.web_service        = web_service
        self.email_service      = email_service

    @classmethod
    def with_managers(cls,
                      building_id: str,
                      door_manager: Optional[DoorManager],
                      light_manager: Optional[LightManager],
                      fire_alarm_manager: Optional[FireAlarmManager],
                      web_service: Optional[WebService],
                      email_service: Optional[EmailService]) -> "BuildingController":
        return cls(building_id,
                   door_manager=door_manager,
                   light_manager=light_manager,
                   fire_alarm_manager=fire_alarm_manager,
                   web_service=web_service,
                   email_service=email_service)

    # --------------------------------------------------------------------- #
    #  Identity
    # --------------------------------------------------------------------- #
    def get_building_id(self) -> str:
        return self._building_id

    def set_building_id(self, building_id: str) -> None:
        if building_id is None:
            raise InvalidIdentityError("id")
        with self._lock:
            self._building_id = building_id.lower()

    # --------------------------------------------------------------------- #
    #  State
    # --------------------------------------------------------------------- #
    def get_current_state(self) -> str:
        return self._machine.state.value

    @property
    def last_normal_state(self) -> str:
        return self._machine.last_normal.value

    def set_current_state(self, state: str) -> bool:
        """Apply a requested state tag; returns False when the request is rejected."""
        requested_tag = state.lower() if isinstance(state, str) else None
        requested = BuildingState.parse(requested_tag)

        with self._lock:
            current = self._machine.state

            if requested is current:
                return True

            if requested is BuildingState.OUT_OF_HOURS and current.is_emergency:
                self._machine.restore_last_normal()
                return True

            if requested is BuildingState.FIRE_ALARM and self._can_raise_fire_alarm():
                self._raise_fire_alarm()
                return True

            if requested_tag == CLOSE_COMMAND and self.door_manager is not None and self.light_manager is not None:
                # secures the building without changing the recorded state
                self.log.info(f"{self._building_id}: locking all doors, lights off")
                self.door_manager.lock_all_doors()
                self.light_manager.set_all_lights(False)
                return True

            if requested is BuildingState.OPEN and not current.is_emergency:
                if self.door_manager is not None and not self.door_manager.open_all_doors():
                    self.log.warning(f"{self._building_id}: doors failed to open, staying {current.value}")
                    return False
                self._machine.enter(BuildingState.OPEN)
                return True

            if requested is not None and requested.is_normal and current.is_normal:
                self._machine.enter(requested)
                return True

            if requested is not None and requested.is_emergency:
                self._machine.enter(requested)
                return True

            self.log.warning(f"{self._building_id}: rejected transition {current.value} -> {state!r}")
            return False

    def _can_raise_fire_alarm(self) -> bool:
        return all(c is not None for c in (self.web_service, self.light_manager, self.door_manager))

    def _raise_fire_alarm(self) -> None:
        self.light_manager.set_all_lights(True)
        self.door_manager.open_all_doors()
        alarm = BuildingState.FIRE_ALARM.value
        try:
            self.web_service.log_fire_alarm(alarm)
        except Exception as e:
            self.log.error(f"{self._building_id}: failed to log {alarm}: {e}")
            self._notify_alarm_log_failure(str(e))
        self._machine.enter(BuildingState.FIRE_ALARM)

    def _notify_alarm_log_failure(self, details: str) -> None:
        if self.email_service is None:
            self.log.warning("no email service configured, alarm log failure not reported")
            return
        self.log.warning(f"notifying {ALARM_LOG_FAILURE_RECIPIENT} of alarm log failure")
        self.email_service.send_email(ALARM_LOG_FAILURE_RECIPIENT, ALARM_LOG_FAILURE_SUBJECT, details)

    # --------------------------------------------------------------------- #
    #  Status
    # --------------------------------------------------------------------- #
    def get_status_report(self) -> str:
        """
        Concatenate the light, door and fire alarm statuses.

        Faulty managers are reported to the web service as an engineer
        request before the report is returned. That call is not guarded.
        """
        with self._lock:
            light_status = self.light_manager.get_status() if self.light_manager is not None else ""
            door_status  = self.door_manager.get_status() if self.door_manager is not None else ""
            fire_status  = self.fire_alarm_manager.get_status() if self.fire_alarm_manager is not None else ""

            faults = detect_faults(light_status, door_status, fire_status)
            if faults:
                self.log.warning(f"{self._building_id}: engineer required for {faults}")
                if self.web_service is not None:
                    self.web_service.log_engineer_required(faults)

            return light_status + door_status + fire_status
