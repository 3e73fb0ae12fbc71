from __future__ import annotations

import json
import logging
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql, graphql_sync

logger = logging.getLogger(__name__)


def _log_errors(result: ExecutionResult) -> ExecutionResult:
    for err in result.errors or ():
        path = ".".join(str(p) for p in err.path) if err.path else "<root>"
        logger.warning(f"GraphQL error at {path}: {err.message}")
    return result


async def execute(
    schema: GraphQLSchema,
    source: str,
    *,
    root_value: Any = None,
    context_value: Any = None,
    variable_values: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ExecutionResult:
    """Run a query through graphql-core; errors are logged and returned as-is."""
    result = await graphql(
        schema,
        source,
        root_value=root_value,
        context_value=context_value,
        variable_values=variable_values,
        operation_name=operation_name,
    )
    return _log_errors(result)


def execute_sync(
    schema: GraphQLSchema,
    source: str,
    *,
    root_value: Any = None,
    context_value: Any = None,
    variable_values: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ExecutionResult:
    result = graphql_sync(
        schema,
        source,
        root_value=root_value,
        context_value=context_value,
        variable_values=variable_values,
        operation_name=operation_name,
    )
    return _log_errors(result)


def to_json(result: ExecutionResult, *, indent: int | None = 2) -> str:
    return json.dumps(result.formatted, indent=indent, ensure_ascii=False)
