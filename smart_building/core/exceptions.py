"""
Centralised exception definitions for the smart building controller.
All custom exceptions should inherit from SmartBuildingError.
"""

START_STATE_MESSAGE = (
    "Argument Exception: BuildingController can only be initialised to the "
    "following states 'open', 'closed', 'out of hours'"
)

class SmartBuildingError(Exception):
    """Base class for every custom exception thrown by this project."""

class InvalidIdentityError(SmartBuildingError, ValueError):
    """Raised when a building ID is missing."""

    def __init__(self, param_name: str = "id"):
        super().__init__(f"{param_name}: ID cannot be null.")
        self.param_name = param_name

class InvalidStartStateError(SmartBuildingError, ValueError):
    """Raised when a controller is initialised outside the normal states."""

    def __init__(self, message: str = START_STATE_MESSAGE):
        super().__init__(message)

class ConfigurationError(SmartBuildingError):
    """Raised when configuration files or environment variables are invalid."""

class TransportError(SmartBuildingError):
    """Failure inside a remote logging or e-mail transport."""
