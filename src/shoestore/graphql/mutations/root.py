"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.shoe import Shoe


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createAShoe")
    async def create_a_shoe(
        self,
        info: strawberry.Info,
        name: str,
        price: int,
        is_trending: bool,
        is_sold_out: bool,
    ) -> Shoe:
        """Create a new shoe."""
        from ..resolvers.shoe import create_shoe

        return await create_shoe(info, name, price, is_trending, is_sold_out)

    @strawberry.mutation(name="updateAShoe")
    async def update_a_shoe(
        self,
        info: strawberry.Info,
        shoe_id: str,
        name: str | None = None,
        price: int | None = None,
        is_trending: bool | None = None,
        is_sold_out: bool | None = None,
    ) -> Shoe:
        """Update some or all fields of an existing shoe."""
        from ..resolvers.shoe import update_shoe

        return await update_shoe(
            info,
            shoe_id,
            name=name,
            price=price,
            is_trending=is_trending,
            is_sold_out=is_sold_out,
        )

    @strawberry.mutation(name="markAShoeAsSoldOut")
    async def mark_a_shoe_as_sold_out(self, info: strawberry.Info, shoe_id: str) -> Shoe:
        """Mark a shoe as sold out."""
        from ..resolvers.shoe import mark_shoe_as_sold_out

        return await mark_shoe_as_sold_out(info, shoe_id)

    @strawberry.mutation(name="deleteAShoe")
    async def delete_a_shoe(self, info: strawberry.Info, shoe_id: str) -> Shoe:
        """Delete a shoe, returning it as it was."""
        from ..resolvers.shoe import delete_shoe

        return await delete_shoe(info, shoe_id)
