"""Smart Building Controller - Main Package"""

__version__ = '1.0.0'
__description__ = 'Building state coordinator for doors, lights and fire alarms'

# Core - most fundamental
from .core import (
    BuildingState,
    SmartBuildingError,
    InvalidIdentityError,
    InvalidStartStateError,
)

# Collaborator interfaces and simulated devices
from .managers import (
    DoorManager,
    LightManager,
    FireAlarmManager,
    SimulatedDoorManager,
    SimulatedLightManager,
    SimulatedFireAlarmManager,
)

# Transports
from .services import WebService, EmailService, FrappeService, FrappeWebService, FrappeEmailService

# Controller
from .controller import BuildingController, detect_faults

__all__ = [
    # Core
    'BuildingState',
    'SmartBuildingError',
    'InvalidIdentityError',
    'InvalidStartStateError',

    # Managers
    'DoorManager',
    'LightManager',
    'FireAlarmManager',
    'SimulatedDoorManager',
    'SimulatedLightManager',
    'SimulatedFireAlarmManager',

    # Services
    'WebService',
    'EmailService',
    'FrappeService',
    'FrappeWebService',
    'FrappeEmailService',

    # Controller
    'BuildingController',
    'detect_faults'
]
