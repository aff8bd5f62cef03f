from .customer import ICustomerRepository

__all__ = [
    "ICustomerRepository",
]
