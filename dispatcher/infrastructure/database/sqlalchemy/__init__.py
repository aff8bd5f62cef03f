from .db import SQLAlchemyDatabase

__all__ = [
    "SQLAlchemyDatabase",
]
