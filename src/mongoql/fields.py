"""Field descriptors shared by the GraphQL and storage sides of a type.

A descriptor carries the API shape (`type`, `args`, `resolve`) and, separately,
the storage shape. The storage shape is one of:

- `Stored`    a declarative mongoengine field persisted on the document
- `Reference` a reference to another document type, looked up by name
- `Computed`  a method bound onto the document class
- `None`      API-only; nothing is persisted
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mongoengine.base import BaseField

if TYPE_CHECKING:
    from .registry import ModelRegistry


@dataclass(frozen=True, slots=True)
class Stored:
    field: BaseField

    def build(self, registry: ModelRegistry) -> BaseField:
        return self.field


@dataclass(frozen=True, slots=True)
class Reference:
    """Reference to the document registered under `document`.

    The target is resolved on first use, so it may be defined after the
    referencing type.
    """

    document: str
    options: dict[str, Any] = field(default_factory=dict)

    def build(self, registry: ModelRegistry) -> BaseField:
        from .registry import RegistryReferenceField

        return RegistryReferenceField(self.document, registry=registry, **self.options)


@dataclass(frozen=True, slots=True)
class Computed:
    """Document method; called as `method(record, info, **args)`."""

    method: Callable[..., Any]


Declarative = Stored | Reference
StorageSpec = Stored | Reference | Computed | None


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    # GraphQL output type, a DefinedType, or None for storage-only fields.
    # Wrappers take the object type: GraphQLList(food.object_type).
    type: Any = None
    args: Mapping[str, Any] | None = None
    resolve: Callable[..., Any] | None = None
    description: str | None = None
    deprecation_reason: str | None = None
    storage: StorageSpec = None

    @property
    def is_exposed(self) -> bool:
        return self.type is not None

    @property
    def is_declarative(self) -> bool:
        return isinstance(self.storage, (Stored, Reference))

    @property
    def is_computed(self) -> bool:
        return isinstance(self.storage, Computed)


FieldMap = Mapping[str, FieldDescriptor]


@dataclass(frozen=True, slots=True)
class TypeConfig:
    """Name plus a field map, or a zero-argument supplier of one."""

    name: str
    fields: FieldMap | Callable[[], FieldMap]
    description: str | None = None
    # mongoengine collection name; defaults to mongoengine's own derivation
    collection: str | None = None
