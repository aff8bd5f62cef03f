from .namespace import NamespaceService
from .ownership import OwnershipService
from .policy import PolicyService

__all__ = [
    "NamespaceService",
    "OwnershipService",
    "PolicyService",
]
