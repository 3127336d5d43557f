"""Estado da aplicação."""

from app.state.models import AppState, EnvironmentState

__all__ = [
    "AppState",
    "EnvironmentState",
]
