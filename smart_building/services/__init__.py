"""Remote logging and e-mail transports."""

from .base import WebService, EmailService
from .frappe_service import FrappeService, FrappeWebService, FrappeEmailService

__all__ = [
    'WebService',
    'EmailService',
    'FrappeService',
    'FrappeWebService',
    'FrappeEmailService'
]
