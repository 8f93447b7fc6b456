from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...dbmodels import Shoes
from ...logging import get_logger
from ..context import get_session_from_info
from ..types.shoe import Shoe

logger = get_logger(__name__)


# Query resolvers
async def resolve_all_shoes(info: strawberry.Info) -> list[Shoe]:
    """Resolve every stored shoe, in storage order."""
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes))
        return [Shoe.from_model(shoe) for shoe in result.scalars().all()]


async def resolve_shoe_by_id(info: strawberry.Info, shoe_id: str) -> Shoe:
    """
    Resolve a shoe by its ID.

    A missing ID raises the ORM's NoResultFound, which surfaces as a GraphQL error.
    """
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.shoe_id == shoe_id))
        return Shoe.from_model(result.scalar_one())


async def resolve_trending_shoes(info: strawberry.Info) -> list[Shoe]:
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.is_trending.is_(True)))
        return [Shoe.from_model(shoe) for shoe in result.scalars().all()]


async def resolve_sold_out_shoes(info: strawberry.Info) -> list[Shoe]:
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.is_sold_out.is_(True)))
        return [Shoe.from_model(shoe) for shoe in result.scalars().all()]


# Mutation resolvers
async def create_shoe(
    info: strawberry.Info, name: str, price: int, is_trending: bool, is_sold_out: bool
) -> Shoe:
    """Create a new shoe; the ID is generated on insert."""
    async with get_session_from_info(info)() as session:
        shoe = Shoes(name=name, price=price, is_trending=is_trending, is_sold_out=is_sold_out)

        session.add(shoe)
        await session.flush()

        logger.info("Shoe created", shoe_id=shoe.shoe_id, name=shoe.name)

        return Shoe.from_model(shoe)


async def update_shoe(
    info: strawberry.Info,
    shoe_id: str,
    name: str | None = None,
    price: int | None = None,
    is_trending: bool | None = None,
    is_sold_out: bool | None = None,
) -> Shoe:
    """
    Update an existing shoe.

    Only the fields that are provided (not None) are changed.
    """
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.shoe_id == shoe_id))
        shoe = result.scalar_one()

        changes = {
            "name": name,
            "price": price,
            "is_trending": is_trending,
            "is_sold_out": is_sold_out,
        }
        for field, value in changes.items():
            if value is not None:
                setattr(shoe, field, value)

        await session.flush()

        logger.info(
            "Shoe updated",
            shoe_id=shoe.shoe_id,
            updated_fields=[k for k, v in changes.items() if v is not None],
        )

        return Shoe.from_model(shoe)


async def mark_shoe_as_sold_out(info: strawberry.Info, shoe_id: str) -> Shoe:
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.shoe_id == shoe_id))
        shoe = result.scalar_one()

        # Unconditional, even if already sold out
        shoe.is_sold_out = True
        await session.flush()

        logger.info("Shoe marked as sold out", shoe_id=shoe.shoe_id)

        return Shoe.from_model(shoe)


async def delete_shoe(info: strawberry.Info, shoe_id: str) -> Shoe:
    """Delete a shoe and return its state before deletion."""
    async with get_session_from_info(info)() as session:
        result = await session.execute(select(Shoes).where(Shoes.shoe_id == shoe_id))
        shoe = result.scalar_one()

        deleted = Shoe.from_model(shoe)

        await session.delete(shoe)
        await session.flush()

        logger.info("Shoe deleted", shoe_id=shoe_id)

        return deleted
