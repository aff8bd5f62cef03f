from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel

__all__ = [
    "Customer",
    "CustomerToken",
]


class CustomerAlreadyExists(Exception):
    pass


class CustomerNotFound(Exception):
    pass


class Customer(BaseModel):
    AlreadyExists: ClassVar[type[CustomerAlreadyExists]] = CustomerAlreadyExists
    NotFound: ClassVar[type[CustomerNotFound]] = CustomerNotFound

    id: str
    display_name: str
    plan_tier: str


class CustomerToken(BaseModel):
    token: str
    customer_id: str
