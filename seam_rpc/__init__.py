"""
Seam RPC

Exposes an in-process service object graph (callables, values and nested
namespaces) as a JSON-RPC 2.0 endpoint:

1. Definition: the service is classified once into an immutable method tree
2. Dispatch: requests are validated, mapped onto declared parameters and invoked
   with a completion callback
3. Adapters: transports (ZeroMQ) decode wire bytes and forward replies

All adapters support OpenTelemetry trace context injection.
"""

from seam_rpc.rpc import DEFINITION_METHOD, Dispatcher, RpcError, ServiceRegistry, response

__version__ = "0.1.0"

__all__ = [
    "DEFINITION_METHOD",
    "Dispatcher",
    "RpcError",
    "ServiceRegistry",
    "response"
]
