from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table

__all__ = [
    "customer_tokens",
    "customers",
    "metadata",
    "outbound_policies",
    "resource_policies",
]

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String, primary_key=True),
    Column("display_name", String, nullable=False),
    Column("plan_tier", String, nullable=False),
)

customer_tokens = Table(
    "customer_tokens",
    metadata,
    Column("token", String, primary_key=True),
    Column(
        "customer_id",
        String,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)

resource_policies = Table(
    "resource_policies",
    metadata,
    Column("script_name", String, primary_key=True),
    Column("cpu_ms", Integer, nullable=True),
    Column("memory", Integer, nullable=True),
)

outbound_policies = Table(
    "outbound_policies",
    metadata,
    Column("script_name", String, primary_key=True),
    Column("outbound_script_name", String, nullable=False),
)
