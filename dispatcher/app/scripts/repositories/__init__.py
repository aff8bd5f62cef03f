from .policy import IOutboundPolicyRepository, IResourcePolicyRepository

__all__ = [
    "IOutboundPolicyRepository",
    "IResourcePolicyRepository",
]
