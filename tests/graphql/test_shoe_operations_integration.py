"""
Integration tests for shoe GraphQL queries and mutations
"""

from typing import Any

import pytest
from sqlalchemy import select

from shoestore.dbmodels import Shoes
from shoestore.graphql.schema import schema

SHOE_FIELDS = "shoeId name price isTrending isSoldOut"

CREATE_SHOE = f"""
mutation CreateShoe($name: String!, $price: Int!, $isTrending: Boolean!, $isSoldOut: Boolean!) {{
    createAShoe(name: $name, price: $price, isTrending: $isTrending, isSoldOut: $isSoldOut) {{
        {SHOE_FIELDS}
    }}
}}
"""

GET_SHOE = f"""
query GetShoe($shoeId: String!) {{
    getShoeById(shoeId: $shoeId) {{
        {SHOE_FIELDS}
    }}
}}
"""


async def execute(query: str, context: dict[str, Any], **variables: Any):
    return await schema.execute(query, variable_values=variables, context_value=context)


async def create(context: dict[str, Any], **fields: Any) -> dict[str, Any]:
    result = await execute(CREATE_SHOE, context, **fields)
    assert result.errors is None
    return result.data["createAShoe"]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_create_then_list_returns_exactly_that_shoe(db_session, graphql_context):
    created = await create(graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=False)

    assert created["shoeId"]
    assert created["name"] == "Nike"
    assert created["price"] == 140
    assert created["isTrending"] is True
    assert created["isSoldOut"] is False

    result = await execute(f"{{ getAllShoes {{ {SHOE_FIELDS} }} }}", graphql_context)

    assert result.errors is None
    assert result.data["getAllShoes"] == [created]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_create_then_get_by_id_round_trips_fields(db_session, graphql_context):
    created = await create(
        graphql_context, name="Adidas", price=160, isTrending=False, isSoldOut=False
    )

    result = await execute(GET_SHOE, graphql_context, shoeId=created["shoeId"])

    assert result.errors is None
    assert result.data["getShoeById"] == created


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_generated_ids_are_unique(db_session, graphql_context):
    first = await create(graphql_context, name="A", price=1, isTrending=False, isSoldOut=False)
    second = await create(graphql_context, name="A", price=1, isTrending=False, isSoldOut=False)

    assert first["shoeId"] != second["shoeId"]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_get_by_missing_id_is_an_error(db_session, graphql_context):
    result = await execute(GET_SHOE, graphql_context, shoeId="does-not-exist")

    assert result.errors is not None
    assert result.data is None


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_trending_and_sold_out_filters(db_session, graphql_context):
    nike = await create(graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=False)
    await create(graphql_context, name="Adidas", price=160, isTrending=False, isSoldOut=False)
    timberland = await create(
        graphql_context, name="Timberland", price=240, isTrending=False, isSoldOut=True
    )
    both = await create(graphql_context, name="Vans", price=70, isTrending=True, isSoldOut=True)

    trending = await execute(f"{{ getAllTrendingShoes {{ {SHOE_FIELDS} }} }}", graphql_context)
    sold_out = await execute(f"{{ getAllSoldOutShoes {{ {SHOE_FIELDS} }} }}", graphql_context)

    assert trending.errors is None
    assert sold_out.errors is None
    assert {s["shoeId"] for s in trending.data["getAllTrendingShoes"]} == {
        nike["shoeId"],
        both["shoeId"],
    }
    assert {s["shoeId"] for s in sold_out.data["getAllSoldOutShoes"]} == {
        timberland["shoeId"],
        both["shoeId"],
    }


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_filters_on_empty_inventory_return_empty_lists(db_session, graphql_context):
    result = await execute(
        "{ getAllShoes { shoeId } getAllTrendingShoes { shoeId } getAllSoldOutShoes { shoeId } }",
        graphql_context,
    )

    assert result.errors is None
    assert result.data == {"getAllShoes": [], "getAllTrendingShoes": [], "getAllSoldOutShoes": []}


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_changes_only_given_fields(db_session, graphql_context):
    created = await create(graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=False)

    update = f"""
    mutation Update($shoeId: String!, $price: Int) {{
        updateAShoe(shoeId: $shoeId, price: $price) {{ {SHOE_FIELDS} }}
    }}
    """
    result = await execute(update, graphql_context, shoeId=created["shoeId"], price=99)

    assert result.errors is None
    assert result.data["updateAShoe"] == {**created, "price": 99}

    fetched = await execute(GET_SHOE, graphql_context, shoeId=created["shoeId"])
    assert fetched.data["getShoeById"] == {**created, "price": 99}


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_every_field(db_session, graphql_context):
    created = await create(graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=False)

    shoe_id = created["shoeId"]
    update = f"""
    mutation {{
        updateAShoe(
            shoeId: "{shoe_id}", name: "Nike Air", price: 180,
            isTrending: false, isSoldOut: true
        ) {{ {SHOE_FIELDS} }}
    }}
    """
    result = await execute(update, graphql_context)

    assert result.errors is None
    assert result.data["updateAShoe"] == {
        "shoeId": created["shoeId"],
        "name": "Nike Air",
        "price": 180,
        "isTrending": False,
        "isSoldOut": True,
    }


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_missing_shoe_is_an_error(db_session, graphql_context):
    result = await execute(
        'mutation { updateAShoe(shoeId: "nope", name: "x") { shoeId } }', graphql_context
    )

    assert result.errors is not None


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
@pytest.mark.parametrize("already_sold_out", [False, True])
async def test_mark_as_sold_out_is_unconditional(db_session, graphql_context, already_sold_out):
    created = await create(
        graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=already_sold_out
    )

    mark = f"""
    mutation Mark($shoeId: String!) {{
        markAShoeAsSoldOut(shoeId: $shoeId) {{ {SHOE_FIELDS} }}
    }}
    """
    result = await execute(mark, graphql_context, shoeId=created["shoeId"])

    assert result.errors is None
    assert result.data["markAShoeAsSoldOut"] == {**created, "isSoldOut": True}


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_delete_returns_prior_state_and_removes_row(db_session, graphql_context):
    created = await create(
        graphql_context, name="Timberland", price=240, isTrending=False, isSoldOut=True
    )

    delete = f"""
    mutation Delete($shoeId: String!) {{
        deleteAShoe(shoeId: $shoeId) {{ {SHOE_FIELDS} }}
    }}
    """
    result = await execute(delete, graphql_context, shoeId=created["shoeId"])

    assert result.errors is None
    assert result.data["deleteAShoe"] == created

    fetched = await execute(GET_SHOE, graphql_context, shoeId=created["shoeId"])
    assert fetched.errors is not None

    rows = (await db_session.execute(select(Shoes))).scalars().all()
    assert rows == []


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_delete_missing_shoe_is_an_error(db_session, graphql_context):
    result = await execute('mutation { deleteAShoe(shoeId: "nope") { shoeId } }', graphql_context)

    assert result.errors is not None


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_with_explicit_null_leaves_field_unchanged(db_session, graphql_context):
    created = await create(graphql_context, name="Nike", price=140, isTrending=True, isSoldOut=False)

    update = f"""
    mutation Update($id: String!) {{
        updateAShoe(shoeId: $id, name: null, price: 120) {{ {SHOE_FIELDS} }}
    }}
    """
    result = await execute(update, graphql_context, id=created["shoeId"])

    assert result.errors is None
    assert result.data["updateAShoe"] == {**created, "price": 120}

    fetched = await execute(GET_SHOE, graphql_context, shoeId=created["shoeId"])
    assert fetched.data["getShoeById"]["name"] == "Nike"


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_long_names_and_negative_prices_are_stored_as_given(db_session, graphql_context):
    long_name = "Air " * 75

    created = await create(
        graphql_context, name=long_name, price=-5, isTrending=False, isSoldOut=False
    )

    assert len(created["name"]) == 300
    fetched = await execute(GET_SHOE, graphql_context, shoeId=created["shoeId"])
    assert fetched.data["getShoeById"] == created

    rename = """
    mutation Rename($id: String!, $name: String) {
        updateAShoe(shoeId: $id, name: $name) { name }
    }
    """
    renamed = await execute(
        rename,
        graphql_context,
        id=created["shoeId"],
        name=long_name * 2,
    )
    assert renamed.errors is None
    assert renamed.data["updateAShoe"]["name"] == long_name * 2


def test_name_column_has_no_length_limit():
    from sqlalchemy import Text

    column = Shoes.__table__.c.name
    assert isinstance(column.type, Text)
    assert column.type.length is None
