from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dispatcher.app.customers.domain import Customer
    from dispatcher.app.customers.services import CustomerService
    from dispatcher.app.infrastructure.database import IAtomic

    class IUseCaseServices(IAtomic, Protocol):
        customer: CustomerService

__all__ = [
    "CustomerSeed",
    "CustomerUseCase",
]


class CustomerSeed(NamedTuple):
    id: str
    display_name: str
    plan_tier: str
    token: str


class CustomerUseCase:
    __slots__ = ["_services", "customer_service"]

    def __init__(self, services: IUseCaseServices):
        self._services = services
        self.customer_service = services.customer

    async def create_customer(
        self,
        display_name: str,
        plan_tier: str,
        *,
        token: str,
        customer_id: str | None = None,
    ) -> Customer:
        """
        Creates a new customer with an access token.

        Raises:
            Customer.AlreadyExists: If customer ID or token is already taken.
        """
        return await self.customer_service.create(
            display_name, plan_tier, token=token, customer_id=customer_id
        )

    async def get_by_token(self, token: str) -> Customer:
        """
        Resolves a customer from an access token.

        Raises:
            Customer.NotFound: If token is unknown.
        """
        return await self.customer_service.get_by_token(token)

    async def list_customers(self) -> list[Customer]:
        return await self.customer_service.list_all()

    async def reset(self, seeds: Iterable[CustomerSeed]) -> list[Customer]:
        """Replaces all existing customers and tokens with provided ones."""
        customers = []
        async for tx in self._services.atomic():
            async with tx:
                await self.customer_service.delete_all()
                for seed in seeds:
                    customer = await self.customer_service.create(
                        seed.display_name,
                        seed.plan_tier,
                        token=seed.token,
                        customer_id=seed.id,
                    )
                    customers.append(customer)
        return customers
