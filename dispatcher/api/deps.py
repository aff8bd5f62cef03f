from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from dispatcher.app.customers.domain import Customer
from dispatcher.infrastructure.context import UseCases

from . import exceptions

__all__ = [
    "CurrentCustomerDeps",
    "UseCasesDeps",
]

CUSTOMER_TOKEN_HEADER = "X-Customer-Token"

customer_token_header = APIKeyHeader(name=CUSTOMER_TOKEN_HEADER, auto_error=False)


async def usecases(request: Request):
    return request.state.usecases


async def current_customer(
    usecases: UseCasesDeps,
    token: str | None = Depends(customer_token_header),
) -> Customer:
    """Returns a customer authenticated by the token in the request header."""
    if not token:
        raise exceptions.MissingToken() from None

    try:
        return await usecases.customer.get_by_token(token)
    except Customer.NotFound as exc:
        raise exceptions.InvalidToken() from exc


UseCasesDeps = Annotated[UseCases, Depends(usecases)]
CurrentCustomerDeps = Annotated[Customer, Depends(current_customer)]
