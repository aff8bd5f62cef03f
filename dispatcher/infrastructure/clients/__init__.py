from .fabric import DispatchFabricClient
from .registry import NamespaceRegistryClient

__all__ = [
    "DispatchFabricClient",
    "NamespaceRegistryClient",
]
