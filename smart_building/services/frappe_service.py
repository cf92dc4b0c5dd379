# frappe_service.py

import logging
from typing import Any, Dict, Optional
from frappeclient import FrappeClient
from smart_building.core.exceptions import TransportError
from smart_building.models import FireAlarmLog, EngineerRequest
from .base import WebService, EmailService


logger = logging.getLogger(__name__)

DOCTYPES: Dict[str, dict] = {
    "fire_alarm": {
        "doctype": "Building Alarm Log",
        "model": FireAlarmLog,
    },
    "engineer_required": {
        "doctype": "Engineer Request",
        "model": EngineerRequest,
    },
}

SEND_EMAIL_METHOD = "frappe.core.doctype.communication.email.make"


class FrappeService:
    """Thin wrapper over FrappeClient; logs in on first use."""

    def __init__(self, url: Optional[str] = None, user: Optional[str] = None,
                 pwd: Optional[str] = None, *, client: Any = None):
        self.url     = url
        self._user   = user
        self._pwd    = pwd
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.url:
                raise TransportError("Frappe URL is not configured")
            logger.info(f"Connecting to Frappe at {self.url}")
            try:
                self._client = FrappeClient(self.url, self._user, self._pwd)
            except Exception as e:
                raise TransportError(f"could not log in to {self.url}: {e}") from e
        return self._client

    def insert(self, logical_doctype: str, record) -> Dict[str, Any]:
        """Insert a record under the doctype registered for it."""
        config = DOCTYPES[logical_doctype]
        if not isinstance(record, config["model"]):
            raise TypeError(f"{logical_doctype} expects {config['model'].__name__}, got {type(record).__name__}")
        doc = record.to_doc(config["doctype"])
        logger.info(f"Inserting into Frappe: doctype={config['doctype']}")
        try:
            return self.client.insert(doc)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(f"insert into {config['doctype']} failed: {e}") from e

    def call(self, method: str, params: Dict[str, Any]) -> Any:
        logger.info(f"Calling Frappe method {method}")
        try:
            return self.client.post_api(method, params)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(f"{method} failed: {e}") from e


class FrappeWebService(WebService):
    def __init__(self, frappe: FrappeService, building_id: str):
        self.frappe      = frappe
        self.building_id = building_id

    def log_fire_alarm(self, alarm_type: str) -> None:
        self.frappe.insert("fire_alarm", FireAlarmLog(self.building_id, alarm_type))

    def log_engineer_required(self, log_details: str) -> None:
        self.frappe.insert("engineer_required", EngineerRequest(self.building_id, log_details))


class FrappeEmailService(EmailService):
    def __init__(self, frappe: FrappeService):
        self.frappe = frappe

    def send_email(self, email_address: str, subject: str, message: str) -> None:
        self.frappe.call(SEND_EMAIL_METHOD, {
            "recipients": email_address,
            "subject":    subject,
            "content":    message,
            "send_email": 1,
        })
