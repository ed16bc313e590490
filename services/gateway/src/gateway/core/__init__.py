"""Core infrastructure components."""

from gateway.core.exceptions import ServiceError
from gateway.core.state import AppState, get_app_state, init_app_state

__all__ = ["AppState", "ServiceError", "get_app_state", "init_app_state"]
