"""
mongoql - one field map, two schemas (GraphQL object type + mongoengine document)
"""

from .definer import DefinedType, StorageTypes, TypeDefiner, define_mongo_object
from .errors import (
    CellAlreadySetError,
    ConfigurationError,
    DuplicateTypeError,
    LazyEvaluationError,
    MongoQLError,
    UnknownModelError,
)
from .executor import execute, execute_sync, to_json
from .fields import Computed, FieldDescriptor, Reference, Stored, TypeConfig
from .lazy import Deferred, WriteOnceCell
from .registry import ModelRegistry, RegistryReferenceField, StorageSchema

__version__ = "0.1.0"

__all__ = [
    "TypeDefiner",
    "DefinedType",
    "StorageTypes",
    "define_mongo_object",
    "TypeConfig",
    "FieldDescriptor",
    "Stored",
    "Reference",
    "Computed",
    "ModelRegistry",
    "RegistryReferenceField",
    "StorageSchema",
    "Deferred",
    "WriteOnceCell",
    "execute",
    "execute_sync",
    "to_json",
    "MongoQLError",
    "ConfigurationError",
    "DuplicateTypeError",
    "UnknownModelError",
    "LazyEvaluationError",
    "CellAlreadySetError",
]
