"""
JSON-RPC 2.0 dispatcher

Binds a service object graph to a ``respond(request, on_reply)`` entry point.
Callables are invoked continuation-style: the mapped arguments are followed by a
completion callback ``done(error=None, result=None)`` which the callable must
eventually call. The dispatcher never blocks on it.
"""

import logging
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Dict

from seam_rpc.rpc import envelope
from seam_rpc.rpc.definition import (
    DEFINITION_METHOD,
    Definition,
    ValueLeaf,
    build_definition,
    describe,
    resolve
)
from seam_rpc.rpc.errors import METHOD_NOT_FOUND, ReplyError
from seam_rpc.rpc.params import map_parameters
from seam_rpc.rpc.validation import validate
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)

Reply = Callable[[Dict[str, Any]], None]


class _Completion:
    """Single-shot completion callback handed to a service callable"""

    def __init__(self, request: Dict[str, Any], on_reply: Reply):
        self.request = request
        self.on_reply = on_reply
        self.method = str(request.get("method"))
        self.start_time = time.time()
        self._lock = threading.Lock()
        self._done = False

    def _claim(self) -> bool:
        with self._lock:
            if self._done:
                return False
            self._done = True
            return True

    def __call__(self, error: Any = None, result: Any = None) -> None:
        if not self._claim():
            logger.warning(f"Ignoring repeated completion of {self.method} (id={self.request.get('id')!r})")
            increment_counter("rpc.dispatch.duplicate_completions", 1, {"method": self.method})
            return

        latency_ms = (time.time() - self.start_time) * 1000
        record_latency("rpc.dispatch.latency", latency_ms, {"method": self.method})

        if error is not None:
            increment_counter("rpc.dispatch.method.errors", 1, {"method": self.method})
            reply = envelope.failure(self.request, error)
        else:
            reply = envelope.success(self.request, result)

        try:
            self.on_reply(reply)
        except Exception as e:
            logger.error(f"Reply delivery failed for {self.method} (id={self.request.get('id')!r}): {e}")
            increment_counter("rpc.dispatch.errors", 1, {"type": "reply_failed"})
            raise ReplyError(f"Reply delivery failed for {self.method}: {e}") from e


class Dispatcher:
    """
    Dispatches validated requests against an immutable method definition tree
    """

    def __init__(self, service: Any):
        """Build the definition tree of a service

        Args:
            service: Object graph of callables, values and namespaces
        """
        self.definition = build_definition(service)

    @classmethod
    def from_definition(cls, definition: Definition) -> "Dispatcher":
        dispatcher = cls.__new__(cls)
        dispatcher.definition = definition
        return dispatcher

    def respond(self, request: Any, on_reply: Reply) -> None:
        """Handle one request and deliver its reply envelope to on_reply

        Protocol errors and values reply synchronously; callables reply
        whenever they call their completion callback.
        """
        increment_counter("rpc.dispatch.requests", 1)

        error = validate(self.definition, request)
        if error is not None:
            error_type = "method_not_found" if error["code"] == METHOD_NOT_FOUND else "invalid_request"
            logger.debug(f"Rejected request: {error['message']}")
            increment_counter("rpc.dispatch.errors", 1, {"type": error_type})
            on_reply(envelope.failure(request, error))
            return

        method = request["method"]
        if method == DEFINITION_METHOD:
            on_reply(envelope.success(request, describe(self.definition)))
            return

        leaf = resolve(self.definition, method)
        if isinstance(leaf, ValueLeaf):
            on_reply(envelope.success(request, leaf.value))
            return

        done = _Completion(request, on_reply)
        try:
            args = map_parameters(request.get("params"), leaf.params)
            with create_span(f"rpc.{method}", {"rpc.method": method}):
                leaf.invoke(*args, done)
        except ReplyError:
            raise
        except Exception as e:
            logger.exception(f"Error invoking {method}: {e}")
            done(e)

    def call(self, request: Any) -> "Future[Dict[str, Any]]":
        """Dispatch a request and return a Future resolved with its reply"""
        future = Future()
        self.respond(request, future.set_result)
        return future


def response(service: Any) -> Callable[[Any, Reply], None]:
    """Build the ``respond(request, on_reply)`` entry point for a service"""
    return Dispatcher(service).respond
