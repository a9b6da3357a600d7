"""
JSON-RPC 2.0 response envelopes
"""

from typing import Any, Dict, Mapping

from seam_rpc.rpc.errors import INTERNAL_ERROR, JSONRPC_VERSION, RpcError


def _request_id(request: Any) -> Any:
    if isinstance(request, Mapping):
        return request.get("id")
    return None


def serialize_error(error: Any) -> Dict[str, Any]:
    """Flatten an error value into transmissible data

    Protocol error descriptors (mappings) are kept verbatim; mappings missing
    ``code`` or ``message`` get internal error defaults.
    """
    if isinstance(error, Mapping):
        serialized = dict(error)
        serialized.setdefault("code", INTERNAL_ERROR)
        serialized.setdefault("message", "Internal error")
        return serialized

    if isinstance(error, RpcError):
        return error.to_dict()

    if isinstance(error, BaseException):
        code = getattr(error, "code", None)
        serialized = {
            "code": code if isinstance(code, int) and not isinstance(code, bool) else INTERNAL_ERROR,
            "message": str(error) or type(error).__name__,
            "name": type(error).__name__,
        }
        for key, value in vars(error).items():
            if not key.startswith("_") and key not in serialized:
                serialized[key] = value
        return serialized

    return {"code": INTERNAL_ERROR, "message": str(error)}


def success(request: Any, result: Any) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": _request_id(request),
        "result": result,
    }


def failure(request: Any, error: Any) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": _request_id(request),
        "error": serialize_error(error),
    }
