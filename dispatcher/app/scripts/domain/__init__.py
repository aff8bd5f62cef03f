from .dispatch import DispatchRequest, DispatchResponse
from .policy import OutboundPolicy, ResourcePolicy
from .publish import PublishResult, PublishStep
from .script import Script
from .tags import OwnershipTagSet

__all__ = [
    "DispatchRequest",
    "DispatchResponse",
    "OutboundPolicy",
    "OwnershipTagSet",
    "PublishResult",
    "PublishStep",
    "ResourcePolicy",
    "Script",
]
