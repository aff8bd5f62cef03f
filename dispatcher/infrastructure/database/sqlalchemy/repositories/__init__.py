from .customer import CustomerRepository
from .policy import OutboundPolicyRepository, ResourcePolicyRepository

__all__ = [
    "CustomerRepository",
    "OutboundPolicyRepository",
    "ResourcePolicyRepository",
]
