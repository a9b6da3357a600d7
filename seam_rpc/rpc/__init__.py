"""
JSON-RPC 2.0 Implementation Module

Reflective method registry and dispatch engine, independent of the underlying
communication protocol:
- introspection: parameter name extraction
- definition: method definition tree
- validation / params / envelope: request checks, argument mapping, replies
- dispatcher: the respond(request, on_reply) entry point
- registry: explicit registration builder
"""

from .definition import (
    DEFINITION_METHOD,
    FUNCTION_TYPE,
    VALUE_TYPE,
    CallableLeaf,
    ValueLeaf,
    build_definition,
    describe,
    resolve
)
from .dispatcher import Dispatcher, response
from .envelope import failure, serialize_error, success
from .errors import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ExtractionError,
    ReplyError,
    RpcError
)
from .introspection import parameter_names
from .params import map_parameters
from .registry import ServiceRegistry
from .validation import validate

__all__ = [
    "DEFINITION_METHOD",
    "FUNCTION_TYPE",
    "VALUE_TYPE",
    "CallableLeaf",
    "ValueLeaf",
    "build_definition",
    "describe",
    "resolve",
    "Dispatcher",
    "response",
    "failure",
    "serialize_error",
    "success",
    "INTERNAL_ERROR",
    "INVALID_REQUEST",
    "JSONRPC_VERSION",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "ExtractionError",
    "ReplyError",
    "RpcError",
    "parameter_names",
    "map_parameters",
    "ServiceRegistry",
    "validate"
]
