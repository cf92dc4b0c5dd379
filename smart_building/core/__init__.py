# smart_building/core/__init__.py
"""Core infrastructure components for the smart building controller."""

# Import order: most fundamental to most specific

from .exceptions import (
    SmartBuildingError,
    InvalidIdentityError,
    InvalidStartStateError,
    ConfigurationError,
    TransportError,
)

from .patterns.state_machine import (
    BuildingState,
    BuildingStateMachine,
    NORMAL_STATES,
    EMERGENCY_STATES,
)


__all__ = [
    "BuildingState",
    "BuildingStateMachine",
    "NORMAL_STATES",
    "EMERGENCY_STATES",
    "SmartBuildingError",
    "InvalidIdentityError",
    "InvalidStartStateError",
    "ConfigurationError",
    "TransportError",
]
