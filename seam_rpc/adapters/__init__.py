"""
Communication Adapters Module

Transport adapters feeding decoded JSON-RPC 2.0 requests to the dispatcher:
- zeromq: ZeroMQ REQ/REP adapter (tcp, ipc, inproc)

All adapters carry OpenTelemetry trace context alongside requests.
"""

from .adapter_interface import ClientAdapterInterface, ServerAdapterInterface

__all__ = [
    "ClientAdapterInterface",
    "ServerAdapterInterface"
]
