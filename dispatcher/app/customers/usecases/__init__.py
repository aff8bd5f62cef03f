from .customer import CustomerSeed, CustomerUseCase

__all__ = [
    "CustomerSeed",
    "CustomerUseCase",
]
