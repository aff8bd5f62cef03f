from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dispatcher.app.customers.domain import Customer, CustomerToken


class ICustomerRepository(Protocol):
    async def delete_all(self) -> None:
        """Deletes every customer together with all of their tokens."""

    async def get_by_token(self, token: str) -> Customer:
        """
        Returns a customer that holds the given token.

        Raises:
            Customer.NotFound: If no customer holds the token.
        """

    async def list_all(self) -> list[Customer]:
        """Lists all customers ordered by display name."""

    async def save(self, customer: Customer) -> Customer:
        """
        Saves a new customer.

        Raises:
            Customer.AlreadyExists: If customer with the same ID already exists.
        """

    async def save_token(self, token: CustomerToken) -> CustomerToken:
        """
        Saves a new token for a customer.

        Raises:
            Customer.AlreadyExists: If the token is already issued.
            Customer.NotFound: If the customer does not exist.
        """
