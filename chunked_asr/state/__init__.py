from .turn import TurnState
from .phase import TurnPhase
from .settings import AppSettings, AudioSettings, AuthSettings, HttpSettings, BufferSettings

__all__ = [
    "AppSettings",
    "AudioSettings",
    "AuthSettings",
    "BufferSettings",
    "HttpSettings",
    "TurnPhase",
    "TurnState",
]
