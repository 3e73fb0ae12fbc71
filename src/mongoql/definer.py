"""Dual-schema type definer.

One field map produces both a GraphQL object type and a mongoengine document.
Both shapes come out of a single deferred evaluation of the field map, which
graphql-core runs when it first asks the object type for its fields (usually
while building the GraphQLSchema). Until then the storage side is unavailable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from graphql import GraphQLField, GraphQLFieldMap, GraphQLObjectType, GraphQLResolveInfo
from mongoengine import Document
from mongoengine.base import BaseField

from .errors import ConfigurationError
from .fields import Computed, FieldDescriptor, FieldMap, Reference, Stored, TypeConfig
from .lazy import Deferred, WriteOnceCell
from .registry import ModelRegistry, StorageSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StorageTypes:
    schema: StorageSchema | None = None
    model: type[Document] | None = None


_UNAVAILABLE = StorageTypes()


class DefinedType:
    """A GraphQL object type and the storage shape derived alongside it."""

    def __init__(
        self,
        name: str,
        object_type: GraphQLObjectType,
        fields: Deferred[GraphQLFieldMap],
        storage: WriteOnceCell[StorageTypes],
    ):
        self.name = name
        self.object_type = object_type
        self._fields = fields
        self._storage = storage

    @property
    def materialized(self) -> bool:
        return self._storage.is_set

    def storage_types(self) -> StorageTypes:
        """Return the storage schema and model, or `None`s before evaluation."""
        return self._storage.get() or _UNAVAILABLE

    def materialize(self) -> StorageTypes:
        """Force the field evaluation (idempotent) and return the storage side."""
        self._fields()
        return self.storage_types()

    def __repr__(self) -> str:
        state = "materialized" if self.materialized else "pending"
        return f"<DefinedType {self.name} {state}>"


def _output_type(value: Any) -> Any:
    if isinstance(value, DefinedType):
        return value.object_type
    return value


def _method_resolver(field_name: str) -> Callable[..., Any]:
    def resolve(record: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        method = getattr(record, field_name)
        return method(info, **args)

    resolve.__name__ = f"resolve_{field_name}"
    return resolve


class TypeDefiner:
    def __init__(self, registry: ModelRegistry):
        self.registry = registry

    def define(self, config: TypeConfig) -> DefinedType:
        self.registry.reserve(config.name)

        field_map: Deferred[FieldMap] = Deferred.of(config.fields)
        storage: WriteOnceCell[StorageTypes] = WriteOnceCell()

        def is_type_of(value: Any, info: GraphQLResolveInfo) -> bool:
            types = storage.get()
            if types is None:
                return False
            # API-only types claim anything that is not a stored document
            if types.model is None:
                return not isinstance(value, Document)
            return isinstance(value, types.model)

        fields: Deferred[GraphQLFieldMap] = Deferred(
            lambda: self._derive(config, field_map, storage)
        )
        object_type = GraphQLObjectType(
            config.name,
            fields,
            is_type_of=is_type_of,
            description=config.description,
        )
        return DefinedType(config.name, object_type, fields, storage)

    def _derive(
        self,
        config: TypeConfig,
        field_map: Deferred[FieldMap],
        storage: WriteOnceCell[StorageTypes],
    ) -> GraphQLFieldMap:
        name = config.name
        stored: dict[str, BaseField] = {}
        methods: dict[str, Callable[..., Any]] = {}
        output: GraphQLFieldMap = {}

        for field_name, descriptor in field_map().items():
            if not isinstance(descriptor, FieldDescriptor):
                raise ConfigurationError(
                    f"{name}.{field_name} must be a FieldDescriptor, got {type(descriptor).__name__}"
                )

            spec = descriptor.storage
            resolve = descriptor.resolve
            if isinstance(spec, Computed):
                methods[field_name] = spec.method
                resolve = _method_resolver(field_name)
            elif isinstance(spec, (Stored, Reference)):
                stored[field_name] = spec.build(self.registry)
            elif spec is not None:
                raise ConfigurationError(
                    f"{name}.{field_name} has unsupported storage {type(spec).__name__}"
                )

            if descriptor.is_exposed:
                output[field_name] = GraphQLField(
                    _output_type(descriptor.type),
                    args=dict(descriptor.args) if descriptor.args else None,
                    resolve=resolve,
                    description=descriptor.description,
                    deprecation_reason=descriptor.deprecation_reason,
                )

        schema = StorageSchema(name, stored, methods, collection=config.collection)
        model = None
        if schema.is_empty:
            logger.warning(f"No storage definitions found for {name} type.")
        else:
            model = self.registry.register(schema)

        storage.set(StorageTypes(schema=schema, model=model))
        return output


def define_mongo_object(config: TypeConfig, registry: ModelRegistry) -> DefinedType:
    return TypeDefiner(registry).define(config)
