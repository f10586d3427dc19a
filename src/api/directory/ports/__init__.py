"""Ports for the directory bounded context."""

from directory.ports.exceptions import RequestError, UserNotFoundError
from directory.ports.gateway import IUserGateway
from directory.ports.models import (
    CreateUserAck,
    UpdateUserAck,
    UserChanges,
    UserEnvelope,
    UserListResponse,
    UserRecord,
)
from directory.ports.notifications import INotifier, Notification

__all__ = [
    "CreateUserAck",
    "INotifier",
    "IUserGateway",
    "Notification",
    "RequestError",
    "UpdateUserAck",
    "UserChanges",
    "UserEnvelope",
    "UserListResponse",
    "UserNotFoundError",
    "UserRecord",
]
