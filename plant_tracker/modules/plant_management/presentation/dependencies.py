# 📄 File: plant_tracker/modules/plant_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web endpoint the plant list, the undo memory and the sign-in switch
# that belong to the running app, and turns people away who are not signed in.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies resolving the per-application CareRecordStore, UndoBuffer, AuthState and
# Settings from app.state, plus the authentication-flag guard for plant routes.
# 🔗 Dependencies:
# FastAPI, plant_tracker.shared.core (exceptions, security), plant_tracker.shared.config, domain services
# 🔄 Connected Modules / Calls From:
# plant management API v1 endpoints (plants, care events, schedule, auth)

from fastapi import Depends
from fastapi.requests import HTTPConnection

from plant_tracker.shared.config.settings import Settings
from plant_tracker.shared.core.exceptions import AuthenticationError
from plant_tracker.shared.core.security import AuthState

from ..domain.services.care_record_store import CareRecordStore
from ..domain.services.undo_buffer import UndoBuffer


def get_app_settings(connection: HTTPConnection) -> Settings:
    return connection.app.state.settings


def get_store(connection: HTTPConnection) -> CareRecordStore:
    return connection.app.state.store


def get_undo_buffer(connection: HTTPConnection) -> UndoBuffer:
    return connection.app.state.undo_buffer


def get_auth_state(connection: HTTPConnection) -> AuthState:
    return connection.app.state.auth_state


def is_access_allowed(auth_state: AuthState, settings: Settings) -> bool:
    return auth_state.is_authenticated() or not settings.AUTH_REQUIRED


async def require_authenticated(
    auth_state: AuthState = Depends(get_auth_state),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """
    Refuse the request while the authentication flag is off.

    Raises:
        AuthenticationError: when AUTH_REQUIRED is set and nobody is signed in
    """
    if not is_access_allowed(auth_state, settings):
        raise AuthenticationError("Sign in to manage your plants")
