"""
JSON-RPC 2.0 request validation

Checks run in order and the first failing check wins.
"""

from typing import Any, Dict, Mapping, Optional

from seam_rpc.rpc.definition import DEFINITION_METHOD, Definition, is_leaf, resolve
from seam_rpc.rpc.errors import INVALID_REQUEST, JSONRPC_VERSION, METHOD_NOT_FOUND


def _error(code: int, message: str) -> Dict[str, Any]:
    return {"code": code, "message": message}


def validate(definition: Definition, request: Any) -> Optional[Dict[str, Any]]:
    """Validate a request envelope against the definition tree

    Args:
        definition: Method definition tree of the service
        request: Decoded, untrusted request object

    Returns:
        Dict: Protocol error descriptor ``{code, message}``, or None when the
        request is valid
    """
    if not isinstance(request, Mapping) or request.get("jsonrpc") != JSONRPC_VERSION:
        return _error(INVALID_REQUEST, "The JSON-RPC version doesn't match 2.0")

    # a null id is a present id; notifications are not supported
    if "id" not in request:
        return _error(INVALID_REQUEST, "The id member is missing")

    method = request.get("method")
    if method != DEFINITION_METHOD:
        node = resolve(definition, method)

        if node is None:
            return _error(METHOD_NOT_FOUND, "The method was not found")

        if not is_leaf(node):
            return _error(INVALID_REQUEST, "The method is not a leaf object")

    params = request.get("params")
    if params is not None and not isinstance(params, (list, tuple, Mapping)):
        return _error(INVALID_REQUEST, "The params member must be an array or an object")

    return None
