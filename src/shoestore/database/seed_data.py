"""
Reusable seed data functions for database initialization.

This module provides functions to seed the sample shoe inventory into the
database.

Seeding is idempotent: shoes are matched by name, so running it again does
not insert duplicates. Sample names are stored trimmed, so the Nike entry
is "Nike" and never "Nike " with a trailing space.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Shoes
from ..logging import get_logger

logger = get_logger(__name__)

SAMPLE_SHOES: list[dict[str, Any]] = [
    {"name": "Nike", "price": 140, "is_trending": True, "is_sold_out": False},
    {"name": "Adidas", "price": 160, "is_trending": False, "is_sold_out": False},
    {"name": "Timberland", "price": 240, "is_trending": False, "is_sold_out": True},
]


async def ensure_shoe(
    db: AsyncSession,
    *,
    name: str,
    price: int,
    is_trending: bool,
    is_sold_out: bool,
) -> Shoes:
    """
    Ensure a shoe with the given name exists in the database.

    Creates the shoe if no row with that name is stored yet, otherwise returns
    the existing row untouched.

    Args:
        db: Database session
        name: Shoe name (the lookup key)
        price: Price used when creating
        is_trending: Trending flag used when creating
        is_sold_out: Sold-out flag used when creating

    Returns:
        The existing or newly created shoe
    """
    stmt = select(Shoes).where(Shoes.name == name)
    result = await db.execute(stmt)
    existing = result.scalars().first()

    if existing is not None:
        logger.debug("Shoe already exists", shoe_id=existing.shoe_id, name=name)
        return existing

    shoe = Shoes(name=name, price=price, is_trending=is_trending, is_sold_out=is_sold_out)
    db.add(shoe)
    await db.flush()

    logger.info("Created shoe", shoe_id=shoe.shoe_id, name=name, price=price)
    return shoe


async def seed_sample_shoes(db: AsyncSession) -> list[Shoes]:
    """
    Seed the sample shoe inventory.

    Safe to call multiple times; existing shoes are left as they are.
    """
    logger.info("Seeding sample shoes")

    shoes = [await ensure_shoe(db, **data) for data in SAMPLE_SHOES]
    await db.commit()

    logger.info("Sample shoes seeded", count=len(shoes))
    return shoes
