"""
ZeroMQ Adapter Package

ZeroMQ-based server and client adapters speaking JSON-RPC 2.0.
"""

from seam_rpc.adapters.zeromq.client import ZeroMQClient
from seam_rpc.adapters.zeromq.server import ZeroMQServer

__all__ = ["ZeroMQClient", "ZeroMQServer"]
