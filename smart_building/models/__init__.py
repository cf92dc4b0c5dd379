"""Records written to the remote building log."""

from .alert_models import FireAlarmLog, EngineerRequest

__all__ = [
    'FireAlarmLog',
    'EngineerRequest'
]
