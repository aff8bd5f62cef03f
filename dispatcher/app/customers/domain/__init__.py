from .customer import Customer, CustomerToken

__all__ = [
    "Customer",
    "CustomerToken",
]
