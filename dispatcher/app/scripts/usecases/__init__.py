from .dispatch import DispatchUseCase
from .script import ScriptUseCase

__all__ = [
    "DispatchUseCase",
    "ScriptUseCase",
]
