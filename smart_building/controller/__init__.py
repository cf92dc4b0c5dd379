"""Building state controller and fault detection."""

from .building_controller import (
    BuildingController,
    ALARM_LOG_FAILURE_RECIPIENT,
    ALARM_LOG_FAILURE_SUBJECT,
)
from .fault_detection import detect_faults

__all__ = [
    'BuildingController',
    'ALARM_LOG_FAILURE_RECIPIENT',
    'ALARM_LOG_FAILURE_SUBJECT',
    'detect_faults'
]
