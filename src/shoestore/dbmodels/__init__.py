"""
Database models for the Shoe Store (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from uuid import uuid4

from sqlalchemy import Boolean, Integer, MetaData, PrimaryKeyConstraint, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


def generate_shoe_id() -> str:
    return str(uuid4())


class Shoes(Base):
    __tablename__ = "shoes"
    __table_args__ = (PrimaryKeyConstraint("shoe_id", name="shoes_pkey"),)

    shoe_id: Mapped[str] = mapped_column(String(36), default=generate_shoe_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    is_trending: Mapped[bool] = mapped_column(Boolean, nullable=False)
    is_sold_out: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self) -> str:
        return f"<Shoes shoe_id={self.shoe_id!r} name={self.name!r}>"


target_metadata = Base.metadata

__all__ = ["Base", "Shoes", "generate_shoe_id", "target_metadata"]
