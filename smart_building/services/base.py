# smart_building/services/base.py
from abc import ABC, abstractmethod

class WebService(ABC):
    """Remote log for alarms and maintenance requests"""

    @abstractmethod
    def log_fire_alarm(self, alarm_type: str) -> None:
        """Record a fire alarm; may raise when the backend is unreachable"""
        pass

    @abstractmethod
    def log_engineer_required(self, log_details: str) -> None:
        """Record that the listed devices need an engineer"""
        pass

class EmailService(ABC):
    """Outgoing e-mail notifications"""

    @abstractmethod
    def send_email(self, email_address: str, subject: str, message: str) -> None:
        pass
