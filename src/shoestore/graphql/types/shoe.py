"""
Shoe GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Shoes


@strawberry.type
class Shoe:
    """Shoe type for GraphQL API."""

    shoe_id: str
    name: str
    price: int
    is_trending: bool
    is_sold_out: bool

    @classmethod
    def from_model(cls, shoe: "Shoes") -> "Shoe":
        """Convert a SQLAlchemy row to the GraphQL type."""
        return cls(
            shoe_id=shoe.shoe_id,
            name=shoe.name,
            price=shoe.price,
            is_trending=shoe.is_trending,
            is_sold_out=shoe.is_sold_out,
        )
