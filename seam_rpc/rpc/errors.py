"""
JSON-RPC 2.0 error codes and exception types
"""

from typing import Any, Dict

JSONRPC_VERSION = "2.0"

# Reserved error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class RpcError(Exception):
    """Error carrying a JSON-RPC error code

    Raised by service callables (or passed to their completion callback) to
    control the ``code`` of the error envelope.
    """

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


class ExtractionError(ValueError):
    """Raised when a callable's parameter list cannot be recovered."""


class ReplyError(RuntimeError):
    """Raised when the reply callback fails to deliver an envelope."""
