"""Door, light and fire-alarm managers."""

from .base import Manager, DoorManager, LightManager, FireAlarmManager
from .simulated import SimulatedDoorManager, SimulatedLightManager, SimulatedFireAlarmManager

__all__ = [
    'Manager',
    'DoorManager',
    'LightManager',
    'FireAlarmManager',
    'SimulatedDoorManager',
    'SimulatedLightManager',
    'SimulatedFireAlarmManager'
]
