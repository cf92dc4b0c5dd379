"""Reusable state handling for the building controller."""

from .state_machine import BuildingState, BuildingStateMachine, NORMAL_STATES, EMERGENCY_STATES

__all__ = [
    "BuildingState",
    "BuildingStateMachine",
    "NORMAL_STATES",
    "EMERGENCY_STATES",
]
