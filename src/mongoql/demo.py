"""Food/User demo: a user document referencing a food document.

`Food.description` is computed by a document method; `User.favoriteFood` is a
stored reference whose GraphQL type is the Food object type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from graphql import (
    ExecutionResult,
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)
from mongoengine import Document, StringField

from .definer import DefinedType, TypeDefiner
from .executor import execute, execute_sync
from .fields import Computed, FieldDescriptor, Reference, Stored, TypeConfig
from .registry import ModelRegistry

DEMO_QUERY = """
query Demo($username: String!) {
  user(username: $username) {
    username
    favoriteFood {
      name
      description(isYummy: false)
    }
  }
}
"""


def describe_food(food: Document, info: GraphQLResolveInfo | None, is_yummy: bool = True) -> str:
    desc = "delicious" if is_yummy else "disgusting"
    return f"{food.name} is {desc}!"


def define_food_type(definer: TypeDefiner) -> DefinedType:
    return definer.define(
        TypeConfig(
            name="Food",
            fields=lambda: {
                "name": FieldDescriptor(type=GraphQLString, storage=Stored(StringField())),
                "description": FieldDescriptor(
                    type=GraphQLString,
                    args={
                        "isYummy": GraphQLArgument(
                            GraphQLBoolean, default_value=True, out_name="is_yummy"
                        ),
                    },
                    storage=Computed(describe_food),
                ),
            },
        )
    )


def define_user_type(definer: TypeDefiner, food: DefinedType) -> DefinedType:
    return definer.define(
        TypeConfig(
            name="User",
            fields=lambda: {
                "username": FieldDescriptor(type=GraphQLString, storage=Stored(StringField())),
                "favoriteFood": FieldDescriptor(type=food, storage=Reference(food.name)),
            },
        )
    )


def _resolve_user(_root: Any, info: GraphQLResolveInfo, username: str) -> Document | None:
    return info.context["users"].get(username)


@dataclass
class DemoApp:
    registry: ModelRegistry
    food: DefinedType
    user: DefinedType
    schema: GraphQLSchema
    users: dict[str, Document] = field(default_factory=dict)
    foods: dict[str, Document] = field(default_factory=dict)

    def context(self) -> dict[str, Any]:
        return {"users": self.users, "foods": self.foods}

    def seed(self) -> None:
        food_model = self.food.materialize().model
        user_model = self.user.materialize().model

        pizza = food_model(name="pizza")
        self.foods["pizza"] = pizza
        self.users["yusef"] = user_model(username="yusef", favoriteFood=pizza)

    async def run(self, query: str = DEMO_QUERY, *, username: str = "yusef") -> ExecutionResult:
        return await execute(
            self.schema,
            query,
            context_value=self.context(),
            variable_values={"username": username},
        )

    def run_sync(self, query: str = DEMO_QUERY, *, username: str = "yusef") -> ExecutionResult:
        return execute_sync(
            self.schema,
            query,
            context_value=self.context(),
            variable_values={"username": username},
        )


def build_demo(registry: ModelRegistry | None = None, *, seed: bool = True) -> DemoApp:
    registry = registry if registry is not None else ModelRegistry()
    definer = TypeDefiner(registry)

    food = define_food_type(definer)
    user = define_user_type(definer, food)

    query_type = GraphQLObjectType(
        "RootQuery",
        {
            "user": GraphQLField(
                user.object_type,
                args={"username": GraphQLArgument(GraphQLNonNull(GraphQLString))},
                resolve=_resolve_user,
            ),
        },
    )
    # Building the schema evaluates every reachable field map, which also
    # materializes the storage side of Food and User.
    schema = GraphQLSchema(query=query_type)

    app = DemoApp(registry=registry, food=food, user=user, schema=schema)
    if seed:
        app.seed()
    return app
