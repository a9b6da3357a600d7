"""
ZeroMQ client adapter

JSON-RPC 2.0 client over a ZeroMQ REQ socket.
"""

import json
import logging
import time
import uuid
from typing import Any, Dict

import zmq

from seam_rpc.adapters.adapter_interface import ClientAdapterInterface
from seam_rpc.config import ClientConfig
from seam_rpc.rpc.definition import DEFINITION_METHOD
from seam_rpc.rpc.errors import JSONRPC_VERSION
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import inject_trace_context
from seam_rpc.utils.serialization import from_json, to_json

logger = logging.getLogger(__name__)


class ZeroMQClient(ClientAdapterInterface):
    """
    ZeroMQ client adapter, one outstanding request at a time
    """

    def __init__(self,
                 server_address: str = "tcp://localhost:5555",
                 timeout_ms: int = 5000):
        """Initialize ZeroMQ client

        Args:
            server_address: ZeroMQ server address
            timeout_ms: Request timeout in milliseconds
        """
        self.server_address = server_address
        self.timeout_ms = timeout_ms
        self.context = zmq.Context()
        self.socket = self.context.socket(zmq.REQ)
        self.socket.connect(server_address)
        self.socket.setsockopt(zmq.RCVTIMEO, timeout_ms)
        self.socket.setsockopt(zmq.LINGER, 0)
        logger.info(f"ZeroMQ client connected to {server_address}")

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ZeroMQClient":
        return cls(server_address=config.server_address, timeout_ms=config.timeout_ms)

    def __del__(self):
        self.close()

    def close(self):
        """Close client connection"""
        if getattr(self, 'socket', None) is not None:
            self.socket.close()
            self.socket = None
        if getattr(self, 'context', None) is not None:
            self.context.term()
            self.context = None

    def call(self, method: str, params: Any = None) -> Dict[str, Any]:
        """Send a JSON-RPC 2.0 request and wait for the response

        Args:
            method: Dotted method name
            params: List or dict of parameters; omitted from the request when None

        Returns:
            Dict: JSON-RPC response envelope (error envelopes are returned, not raised)

        Raises:
            TimeoutError: Request timed out
            ConnectionError: Connection failed
            ValueError: Invalid response
        """
        request_id = str(uuid.uuid4())
        request = {
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "id": request_id
        }
        if params is not None:
            request["params"] = params

        trace_context = inject_trace_context()
        if trace_context:
            request["trace_context"] = trace_context

        request_json = to_json(request)
        start_time = time.time()

        try:
            logger.debug(f"Sending request: {request_json[:200]}...")
            self.socket.send(request_json.encode('utf-8'))
            increment_counter("rpc.client.requests", 1, {"method": method})

            response_bytes = self.socket.recv()
        except zmq.error.Again:
            latency_ms = (time.time() - start_time) * 1000
            logger.error(f"Request timed out after {latency_ms:.2f}ms")
            increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": method})
            raise TimeoutError(f"ZeroMQ request timed out ({self.timeout_ms}ms)")
        except zmq.error.ZMQError as e:
            logger.error(f"ZeroMQ error: {e}")
            increment_counter("rpc.client.errors", 1, {"type": "zmq_error", "method": method})
            raise ConnectionError(f"ZeroMQ connection error: {e}")

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"method": method})
        logger.debug(f"Received response, latency: {latency_ms:.2f}ms")

        try:
            response = from_json(response_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
            raise ValueError(f"Invalid JSON-RPC 2.0 response: {e}")

        if not isinstance(response, dict) or response.get("jsonrpc") != JSONRPC_VERSION:
            logger.error(f"Invalid JSON-RPC 2.0 response: {response}")
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
            raise ValueError("Invalid JSON-RPC 2.0 response")

        if response.get("id") != request_id:
            logger.error(f"Response ID mismatch: {response.get('id')} != {request_id}")
            increment_counter("rpc.client.errors", 1, {"type": "id_mismatch", "method": method})
            raise ValueError(f"Response ID mismatch: {response.get('id')} != {request_id}")

        if "error" in response:
            error = response["error"]
            logger.error(f"RPC error: {error.get('message')}, code: {error.get('code')}")
            increment_counter("rpc.client.errors", 1, {
                "type": "rpc_error",
                "method": method,
                "code": str(error.get('code', -1))
            })
        else:
            increment_counter("rpc.client.success", 1, {"method": method})

        return response

    def describe(self) -> Dict[str, Any]:
        """Fetch the server's method definition tree

        Raises:
            ValueError: The server answered with an error
        """
        response = self.call(DEFINITION_METHOD)
        if "error" in response:
            raise ValueError(f"Introspection failed: {response['error'].get('message')}")
        return response["result"]
