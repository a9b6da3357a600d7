"""
ZeroMQ server adapter

JSON-RPC 2.0 server over a ZeroMQ REP socket. Each request is handed to the
dispatcher and the reply is sent once the service completes it, or an error
once the reply timeout expires.
"""

import concurrent.futures
import json
import logging
import threading
import time
from typing import Any, Dict, Optional

import zmq

from seam_rpc.adapters.adapter_interface import ServerAdapterInterface
from seam_rpc.config import ServerConfig
from seam_rpc.rpc.dispatcher import Dispatcher
from seam_rpc.rpc.envelope import failure
from seam_rpc.rpc.errors import INTERNAL_ERROR, PARSE_ERROR, RpcError
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import extract_trace_context, with_trace_context
from seam_rpc.utils.serialization import from_json, to_json

logger = logging.getLogger(__name__)


class ZeroMQServer(ServerAdapterInterface):
    """
    ZeroMQ server adapter serving one service object graph
    """

    def __init__(self,
                 service: Any = None,
                 bind_address: str = "tcp://*:5555",
                 reply_timeout_ms: int = 30000):
        """Initialize ZeroMQ server

        Args:
            service: Service object graph or Dispatcher (may be registered later)
            bind_address: REP socket bind address
            reply_timeout_ms: Longest wait for a service to complete a request
        """
        self.bind_address = bind_address
        self.reply_timeout_ms = reply_timeout_ms
        self.dispatcher: Optional[Dispatcher] = None
        self.running = False
        self.server_thread = None
        self.context = zmq.Context()

        self.socket = self.context.socket(zmq.REP)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.bind(bind_address)

        if service is not None:
            self.register_service(service)

        increment_counter("rpc.server.started", 1)

        logger.info(f"ZeroMQ server bound to {bind_address}")

    @classmethod
    def from_config(cls, config: ServerConfig, service: Any = None) -> "ZeroMQServer":
        return cls(
            service=service,
            bind_address=config.bind_address,
            reply_timeout_ms=config.reply_timeout_ms
        )

    def __del__(self):
        self.stop()
        self.close()

    def register_service(self, service: Any):
        if isinstance(service, Dispatcher):
            self.dispatcher = service
        else:
            self.dispatcher = Dispatcher(service)
        logger.debug("Service registered")

    def start(self, threaded: bool = True):
        """Start the server

        Args:
            threaded: Whether to run in a separate thread
        """
        if self.dispatcher is None:
            raise RuntimeError("No service registered")

        self.running = True

        if threaded:
            self.server_thread = threading.Thread(target=self._run_server)
            self.server_thread.daemon = True
            self.server_thread.start()
            logger.info("ZeroMQ server started in background thread")
        else:
            logger.info("ZeroMQ server started in main thread")
            self._run_server()

    def stop(self):
        """Stop the server loop"""
        self.running = False
        if getattr(self, 'server_thread', None):
            self.server_thread.join(timeout=1.0)
            self.server_thread = None
            logger.info("ZeroMQ server stopped")

    def close(self):
        """Close the socket and terminate the context"""
        if getattr(self, 'socket', None) is not None:
            self.socket.close()
            self.socket = None
        if getattr(self, 'context', None) is not None:
            self.context.term()
            self.context = None

    def _run_server(self):
        """Server main loop"""
        logger.info("ZeroMQ server accepting requests")

        while self.running:
            try:
                request_bytes = self.socket.recv(flags=zmq.NOBLOCK)
            except zmq.error.Again:
                time.sleep(0.001)
                continue
            except zmq.error.ZMQError as e:
                logger.error(f"Error in server loop: {e}")
                increment_counter("rpc.server.errors", 1, {"type": "loop_error"})
                time.sleep(1.0)
                continue

            start_time = time.time()
            increment_counter("rpc.server.requests.received", 1)

            response = self.handle_message(request_bytes)
            try:
                payload = to_json(response)
            except TypeError as e:
                logger.error(f"Cannot encode reply: {e}")
                increment_counter("rpc.server.errors", 1, {"type": "encode_error"})
                payload = to_json(failure(response, RpcError(INTERNAL_ERROR, f"Internal error: {e}")))
            self.socket.send(payload.encode('utf-8'))

            latency_ms = (time.time() - start_time) * 1000
            record_latency("rpc.server.request.latency", latency_ms)
            logger.debug(f"Response sent in {latency_ms:.2f}ms")

    def handle_message(self, request_bytes: bytes) -> Dict[str, Any]:
        """Decode one message, dispatch it and wait for the reply envelope

        Args:
            request_bytes: Raw request from the socket

        Returns:
            Dict: JSON-RPC response envelope
        """
        try:
            request = from_json(request_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"JSON parse error: {e}")
            increment_counter("rpc.server.errors", 1, {"type": "parse_error"})
            return failure(None, RpcError(PARSE_ERROR, "Parse error"))

        logger.debug(f"Received request: {request_bytes[:200]}...")

        trace_context = None
        if isinstance(request, dict):
            trace_context = extract_trace_context(request.get("trace_context"))

        with with_trace_context(trace_context):
            future = self.dispatcher.call(request)

        try:
            return future.result(timeout=self.reply_timeout_ms / 1000)
        except concurrent.futures.TimeoutError:
            logger.error(f"No reply within {self.reply_timeout_ms}ms for {request.get('method')!r}")
            increment_counter("rpc.server.errors", 1, {"type": "timeout"})
            return failure(request, RpcError(INTERNAL_ERROR, "Internal error: reply timed out"))
