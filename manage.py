from __future__ import annotations

import functools

import click
import uvloop

from dispatcher.app.customers.domain import Customer
from dispatcher.app.customers.usecases import CustomerSeed
from dispatcher.config import config
from dispatcher.infrastructure.context import AppContext

DEMO_CUSTOMERS = [
    CustomerSeed(
        id="559968cd-b048-4bbc-ba21-d12625fcee45",
        display_name="Customer 1",
        plan_tier="basic",
        token="a1b2c3",
    ),
    CustomerSeed(
        id="2612b586-4799-42ff-8c44-d4841e1e70ed",
        display_name="Customer 2",
        plan_tier="advanced",
        token="d4e5f6",
    ),
]


def async_to_sync(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return uvloop.run(func(*args, **kwargs))
    return wrapper


@click.group()
def cli():
    pass


@cli.command()
@click.option(
    "--name",
    "display_name",
    type=str,
    prompt="Display name",
    help="customer display name",
    required=True,
)
@click.option(
    "--plan",
    "plan_tier",
    type=str,
    prompt="Plan tier",
    help="customer plan tier, for example 'basic' or 'advanced'",
    required=True,
)
@click.option(
    "--token",
    envvar="DISPATCHER_CUSTOMER_TOKEN",
    type=str,
    prompt=True,
    hide_input=True,
    help="token the customer authenticates with",
    required=True,
)
@click.option(
    "--id",
    "customer_id",
    type=str,
    default=None,
    help="customer ID, generated if not set",
)
@click.option(
    "--exist-ok",
    is_flag=True,
    default=False,
    help="Whether to raise and exception if a customer already exists.",
)
@async_to_sync
async def create_customer(display_name, plan_tier, token, customer_id, exist_ok):
    """Create a new customer with an access token."""
    async with AppContext(config) as ctx:
        try:
            customer = await ctx.usecases.customer.create_customer(
                display_name, plan_tier, token=token, customer_id=customer_id
            )
        except Customer.AlreadyExists:
            if not exist_ok:
                raise
            click.echo("Customer already exists, skipping...")
        else:
            click.echo(f"Customer created successfully: {customer.id}")


@cli.command()
@click.confirmation_option(
    prompt="This deletes every script in the namespace. Continue?",
)
@async_to_sync
async def init() -> None:
    """
    Reset the environment: delete every script in the namespace, apply schema to a
    database and replace customers with the demo ones.
    """
    async with AppContext(config) as ctx:
        deleted = await ctx.usecases.script.delete_all()
        click.echo(f"Deleted {len(deleted)} script(s).")

        await ctx._infra.database.migrate()

        customers = await ctx.usecases.customer.reset(DEMO_CUSTOMERS)
        for customer in customers:
            click.echo(f"Created customer {customer.display_name} ({customer.id})")


@cli.command()
@async_to_sync
async def list_customers() -> None:
    """List every customer with its plan tier."""
    async with AppContext(config) as ctx:
        customers = await ctx.usecases.customer.list_customers()
        for customer in customers:
            click.echo(
                f"{customer.id}\t{customer.display_name}\t{customer.plan_tier}"
            )


@cli.command()
@async_to_sync
async def list_scripts() -> None:
    """List every script in the namespace with its tags."""
    async with AppContext(config) as ctx:
        scripts = await ctx.usecases.script.list_all()
        for script in scripts:
            click.echo(f"{script.id}\t{','.join(script.tags)}")


@cli.command()
@async_to_sync
async def migrate() -> None:
    """Apply target schema to a database."""
    async with AppContext(config) as ctx:
        await ctx._infra.database.migrate()


if __name__ == "__main__":
    cli()
