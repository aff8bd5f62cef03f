from .customer import CustomerService

__all__ = [
    "CustomerService",
]
