# 📄 File: plant_tracker/shared/core/security.py
# 🧭 Purpose (Layman Explanation):
# Remembers whether someone has "signed in". It is only an on/off switch that decides
# whether the plant screens can be used, not a real login system.
# 🧪 Purpose (Technical Summary):
# Authentication flag collaborator exposing is_authenticated/set_authenticated. The
# presentation layer consults it before touching the plant management services.
# 🔗 Dependencies:
# app logging utilities
# 🔄 Connected Modules / Calls From:
# plant_tracker.main (created per application), plant management presentation dependencies,
# auth API endpoints

from plant_tracker.shared.utils.logging import get_logger

logger = get_logger(__name__)


class AuthState:
    """
    Single authentication flag.

    Login and logout flip the flag; there are no users, sessions or tokens.
    """

    def __init__(self, authenticated: bool = False):
        self._authenticated = bool(authenticated)

    def is_authenticated(self) -> bool:
        return self._authenticated

    def set_authenticated(self, authenticated: bool) -> None:
        authenticated = bool(authenticated)
        if authenticated != self._authenticated:
            logger.info(
                "Authentication flag changed",
                event_type="auth_flag",
                authenticated=authenticated
            )
        self._authenticated = authenticated
