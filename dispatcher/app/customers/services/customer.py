from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Protocol

from dispatcher.app.customers.domain import Customer, CustomerToken
from dispatcher.app.infrastructure.database import IDatabase

if TYPE_CHECKING:
    from dispatcher.app.customers.repositories import ICustomerRepository

__all__ = ["CustomerService"]


class IServiceDatabase(IDatabase, Protocol):
    customer: ICustomerRepository


class CustomerService:
    __slots__ = ["db"]

    def __init__(self, database: IServiceDatabase):
        self.db = database

    async def create(
        self,
        display_name: str,
        plan_tier: str,
        *,
        token: str,
        customer_id: str | None = None,
    ) -> Customer:
        """
        Creates a new customer together with an access token.

        Raises:
            Customer.AlreadyExists: If customer ID or token is already taken.
        """
        async for tx in self.db.atomic():
            async with tx:
                customer = await self.db.customer.save(
                    Customer(
                        id=customer_id or str(uuid.uuid4()),
                        display_name=display_name,
                        plan_tier=plan_tier,
                    )
                )
                await self.db.customer.save_token(
                    CustomerToken(token=token, customer_id=customer.id)
                )
        return customer

    async def delete_all(self) -> None:
        """Deletes all customers and their tokens."""
        await self.db.customer.delete_all()

    async def get_by_token(self, token: str) -> Customer:
        """
        Returns a customer who holds the token.

        Raises:
            Customer.NotFound: If token is unknown.
        """
        return await self.db.customer.get_by_token(token)

    async def list_all(self) -> list[Customer]:
        return await self.db.customer.list_all()
