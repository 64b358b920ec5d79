"""User commands."""

from .update_profile import UpdateProfileCommand, UpdateProfileHandler
from .set_online_status import SetOnlineStatusCommand, SetOnlineStatusHandler

__all__ = [
    "UpdateProfileCommand",
    "UpdateProfileHandler",
    "SetOnlineStatusCommand",
    "SetOnlineStatusHandler",
]
