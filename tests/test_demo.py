import asyncio

from graphql import print_schema

from mongoql.demo import DEMO_QUERY, build_demo, describe_food


def test_demo_query_traverses_the_reference():
    app = build_demo()

    result = asyncio.run(app.run())

    assert result.errors is None
    assert result.data == {
        "user": {
            "username": "yusef",
            "favoriteFood": {"name": "pizza", "description": "pizza is disgusting!"},
        }
    }


def test_description_defaults_to_yummy():
    app = build_demo()

    result = app.run_sync("{ user(username: \"yusef\") { favoriteFood { description } } }")

    assert result.errors is None
    assert result.data["user"]["favoriteFood"]["description"] == "pizza is delicious!"


def test_description_method_on_the_record():
    app = build_demo()
    pizza = app.foods["pizza"]

    assert pizza.description(None, is_yummy=False) == "pizza is disgusting!"
    assert pizza.description(None) == "pizza is delicious!"
    assert describe_food(pizza, None, is_yummy=True) == "pizza is delicious!"


def test_unknown_user_resolves_to_null():
    app = build_demo()

    result = app.run_sync(DEMO_QUERY, username="nobody")

    assert result.errors is None
    assert result.data == {"user": None}


def test_record_of_the_wrong_model_is_rejected():
    app = build_demo()
    app.users["imposter"] = app.foods["pizza"]

    result = app.run_sync(DEMO_QUERY, username="imposter")

    assert result.data == {"user": None}
    assert "Expected value of type 'User'" in result.errors[0].message


def test_schema_building_materializes_both_models():
    app = build_demo(seed=False)

    assert app.food.materialized
    assert app.user.materialized
    assert set(app.registry) == {"Food", "User"}

    user_model = app.user.storage_types().model
    assert user_model._fields["favoriteFood"].document_type is app.food.storage_types().model


def test_demo_apps_do_not_share_models():
    first = build_demo()
    second = build_demo()

    assert first.food.storage_types().model is not second.food.storage_types().model
    assert first.registry.get("Food") is first.food.storage_types().model


def test_schema_sdl_exposes_both_types():
    sdl = print_schema(build_demo(seed=False).schema)

    assert "type Food" in sdl
    assert "description(isYummy: Boolean = true): String" in sdl
    assert "favoriteFood: Food" in sdl
    assert "user(username: String!): User" in sdl
