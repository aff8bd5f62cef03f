from .database import IDatabase
from .errors import DependencyUnavailable
from .fabric import IDispatchFabric, IScriptHandle
from .registry import INamespaceRegistry

__all__ = [
    "DependencyUnavailable",
    "IDatabase",
    "IDispatchFabric",
    "INamespaceRegistry",
    "IScriptHandle",
]
