"""Caller-owned model registry.

mongoengine keeps its own process-wide document table; this registry is the
one mongoql consults, so tests and applications can hold isolated sets of
models side by side.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mongoengine import Document, ReferenceField
from mongoengine.base import BaseField
from mongoengine.fields import RECURSIVE_REFERENCE_CONSTANT

from .errors import ConfigurationError, DuplicateTypeError, UnknownModelError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StorageSchema:
    """Storage-side view of a type: persisted fields plus bound methods."""

    name: str
    fields: Mapping[str, BaseField] = field(default_factory=dict)
    methods: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    collection: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "methods", MappingProxyType(dict(self.methods)))

    @property
    def is_empty(self) -> bool:
        return not self.fields and not self.methods

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)

    @property
    def method_names(self) -> list[str]:
        return list(self.methods)


class ModelRegistry:
    def __init__(self) -> None:
        self._reserved: set[str] = set()
        self._models: dict[str, type[Document]] = {}

    def reserve(self, name: str) -> None:
        """Claim `name` for a type that will register its model later."""
        if not name or not name.strip():
            raise ConfigurationError("Type name must be a non-empty string")
        if name in self._reserved or name in self._models:
            raise DuplicateTypeError(name)
        self._reserved.add(name)

    def register(self, schema: StorageSchema) -> type[Document]:
        name = schema.name
        if name in self._models:
            raise DuplicateTypeError(name)

        for method_name in schema.methods:
            if method_name in schema.fields:
                raise ConfigurationError(
                    f"{name}.{method_name} is declared both as a stored field and a method"
                )
            # vars() rather than hasattr(): `objects` is a descriptor that connects
            if any(method_name in vars(klass) for klass in Document.__mro__):
                raise ConfigurationError(
                    f"{name}.{method_name} would shadow the Document attribute of the same name"
                )

        attrs: dict[str, Any] = {"__module__": __name__}
        attrs.update(schema.fields)
        attrs.update(schema.methods)
        if schema.collection:
            attrs["meta"] = {"collection": schema.collection}

        model = type(name, (Document,), attrs)
        self._reserved.add(name)
        self._models[name] = model
        logger.debug(
            f"Registered model {name} (fields={schema.field_names}, methods={schema.method_names})"
        )
        return model

    def get(self, name: str) -> type[Document]:
        try:
            return self._models[name]
        except KeyError:
            raise UnknownModelError(name) from None

    def models(self) -> dict[str, type[Document]]:
        return dict(self._models)

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"<ModelRegistry models={sorted(self._models)}>"


class RegistryReferenceField(ReferenceField):
    """ReferenceField whose target document is looked up in a ModelRegistry.

    The lookup happens on first access of `document_type`, after which the
    resolved class is cached on the field as mongoengine does for string refs.
    """

    def __init__(self, document_name: str, *, registry: ModelRegistry, **kwargs: Any):
        super().__init__(document_name, **kwargs)
        self._registry = registry

    @property
    def document_type(self):
        if self.document_type_obj == RECURSIVE_REFERENCE_CONSTANT:
            self.document_type_obj = self.owner_document
        elif isinstance(self.document_type_obj, str):
            self.document_type_obj = self._registry.get(self.document_type_obj)
        return self.document_type_obj
