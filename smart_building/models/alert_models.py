from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


###############################################################################
# 1. FIRE ALARM LOG -----------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class FireAlarmLog:
    """Immutable projection of the *Building Alarm Log* Doctype."""
    building_id: str
    alarm_type: str                    # e.g. "fire alarm"
    raised_at: datetime = field(default_factory=datetime.now)

    # ---------- serialiser ------------------------------------------------ #
    def to_doc(self, doctype: str) -> Dict[str, Any]:
        return {
            "doctype"     : doctype,
            "building_id" : self.building_id,
            "alarm_type"  : self.alarm_type,
            "raised_at"   : _fmt_dt(self.raised_at),
        }

###############################################################################
# 2. ENGINEER REQUEST ---------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class EngineerRequest:
    """Immutable projection of the *Engineer Request* Doctype."""
    building_id: str
    faulty_devices: str                # e.g. "Lights,Doors,"
    requested_at: datetime = field(default_factory=datetime.now)

    @property
    def device_types(self) -> list[str]:
        return [d for d in self.faulty_devices.split(",") if d]

    # ---------- serialiser ------------------------------------------------ #
    def to_doc(self, doctype: str) -> Dict[str, Any]:
        return {
            "doctype"        : doctype,
            "building_id"    : self.building_id,
            "faulty_devices" : self.faulty_devices,
            "requested_at"   : _fmt_dt(self.requested_at),
        }

###############################################################################
# Helpers ---------------------------------------------------------------------
###############################################################################

def _fmt_dt(value: datetime) -> str:
    """Frappe stores Datetime fields as 'YYYY-MM-DD HH:MM:SS'."""
    return value.strftime("%Y-%m-%d %H:%M:%S")
