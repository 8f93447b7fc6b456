"""
Root GraphQL query definitions
"""

import strawberry

from ..types.shoe import Shoe


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def get_all_shoes(self, info: strawberry.Info) -> list[Shoe] | None:
        """Get every shoe in the inventory."""
        from ..resolvers.shoe import resolve_all_shoes

        return await resolve_all_shoes(info)

    @strawberry.field
    async def get_shoe_by_id(self, info: strawberry.Info, shoe_id: str) -> Shoe:
        """Get a shoe by ID."""
        from ..resolvers.shoe import resolve_shoe_by_id

        return await resolve_shoe_by_id(info, shoe_id)

    @strawberry.field
    async def get_all_trending_shoes(self, info: strawberry.Info) -> list[Shoe] | None:
        """Get shoes flagged as trending."""
        from ..resolvers.shoe import resolve_trending_shoes

        return await resolve_trending_shoes(info)

    @strawberry.field
    async def get_all_sold_out_shoes(self, info: strawberry.Info) -> list[Shoe] | None:
        """Get shoes flagged as sold out."""
        from ..resolvers.shoe import resolve_sold_out_shoes

        return await resolve_sold_out_shoes(info)
