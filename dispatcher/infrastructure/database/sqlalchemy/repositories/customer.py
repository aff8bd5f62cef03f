from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError

from dispatcher.app.customers.domain import Customer, CustomerToken
from dispatcher.app.customers.repositories import ICustomerRepository
from dispatcher.infrastructure.database.sqlalchemy.tables import (
    customer_tokens,
    customers,
)

if TYPE_CHECKING:
    from sqlalchemy import Row

    from dispatcher.infrastructure.database.sqlalchemy.connection import Connector

__all__ = ["CustomerRepository"]


def _from_db(row: Row) -> Customer:
    return Customer(
        id=row.id,
        display_name=row.display_name,
        plan_tier=row.plan_tier,
    )


class CustomerRepository(ICustomerRepository):
    def __init__(self, connector: Connector):
        self.connector = connector

    async def delete_all(self) -> None:
        async with self.connector.connect() as conn:
            await conn.execute(delete(customer_tokens))
            await conn.execute(delete(customers))

    async def get_by_token(self, token: str) -> Customer:
        query = (
            select(customers.c.id, customers.c.display_name, customers.c.plan_tier)
            .select_from(
                customer_tokens.join(
                    customers, customers.c.id == customer_tokens.c.customer_id
                )
            )
            .where(customer_tokens.c.token == token)
        )
        async with self.connector.connect() as conn:
            row = (await conn.execute(query)).first()
        if row is None:
            raise Customer.NotFound() from None
        return _from_db(row)

    async def list_all(self) -> list[Customer]:
        query = select(customers).order_by(customers.c.display_name)
        async with self.connector.connect() as conn:
            rows = (await conn.execute(query)).all()
        return [_from_db(row) for row in rows]

    async def save(self, customer: Customer) -> Customer:
        query = insert(customers).values(
            id=customer.id,
            display_name=customer.display_name,
            plan_tier=customer.plan_tier,
        )
        try:
            async with self.connector.connect() as conn:
                await conn.execute(query)
        except IntegrityError as exc:
            message = f"Customer '{customer.id}' already exists"
            raise Customer.AlreadyExists(message) from exc
        return customer

    async def save_token(self, token: CustomerToken) -> CustomerToken:
        exists_query = select(customers.c.id).where(customers.c.id == token.customer_id)
        query = insert(customer_tokens).values(
            token=token.token,
            customer_id=token.customer_id,
        )
        try:
            async with self.connector.connect() as conn:
                if (await conn.execute(exists_query)).first() is None:
                    raise Customer.NotFound() from None
                await conn.execute(query)
        except IntegrityError as exc:
            raise Customer.AlreadyExists("Token is already issued") from exc
        return token
