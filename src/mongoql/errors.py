from __future__ import annotations


class MongoQLError(Exception):
    """Base class for errors raised by mongoql itself."""


class ConfigurationError(MongoQLError):
    """A type definition is malformed (empty name, shadowed method, ...)."""


class DuplicateTypeError(ConfigurationError):
    def __init__(self, name: str):
        super().__init__(f"Type {name!r} is already defined in this registry")
        self.name = name


class UnknownModelError(MongoQLError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"No model named {name!r} has been registered")
        self.name = name


class LazyEvaluationError(MongoQLError, RuntimeError):
    """A deferred value was requested while it was still being produced."""


class CellAlreadySetError(MongoQLError):
    """A write-once cell was written a second time."""
