"""Domain services."""

from .base import Service
from .gate_service import GateService
from .invite_broker import InviteBroker, InviteClient, utc_now
from .key_service import KeyService

__all__ = [
    "GateService",
    "InviteBroker",
    "InviteClient",
    "KeyService",
    "Service",
    "utc_now",
]
