#!/usr/bin/env python
"""
ZeroMQ Server Example

Serves a nested service object as a JSON-RPC 2.0 endpoint.
"""

import datetime
import logging
import signal
import sys
import threading

from seam_rpc.adapters.zeromq.server import ZeroMQServer
from seam_rpc.config import ServerConfig
from seam_rpc.rpc.errors import RpcError
from seam_rpc.telemetry.metrics import setup_metrics
from seam_rpc.telemetry.tracer import setup_tracer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class Counter:
    """Stateful namespace; calls are serialized by the lock"""

    def __init__(self):
        self._lock = threading.Lock()
        self.count = 0

    def increment(self, step, done):
        with self._lock:
            self.count += step
            done(None, self.count)

    def reset(self, done):
        with self._lock:
            self.count = 0
        done()


def divide(a, b, done):
    if b == 0:
        return done(RpcError(-32000, "Division by zero"))
    done(None, a / b)


def delayed_echo(message, seconds, done):
    """Completes from a timer thread"""
    threading.Timer(seconds, done, args=(None, message)).start()


service = {
    "math": {
        "add": lambda a, b, done: done(None, a + b),
        "divide": divide,
    },
    "echo": delayed_echo,
    "counter": Counter(),
    "version": "0.1.0",
    "started": datetime.datetime.now(),
}


def main():
    """Start ZeroMQ server example"""
    config = ServerConfig.from_env()

    if config.enable_tracing:
        setup_tracer(config.service_name, config.otlp_endpoint)
        setup_metrics(config.service_name, config.otlp_endpoint)

    server = ZeroMQServer.from_config(config, service)

    def handle_sigint(sig, frame):
        logger.info("Received exit signal, stopping server...")
        server.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    logger.info(f"Starting ZeroMQ server with {config.to_dict()}")

    try:
        server.start(threaded=False)
    except KeyboardInterrupt:
        logger.info("Received exit signal, stopping server...")
    finally:
        server.stop()
        server.close()

    logger.info("Server stopped")


if __name__ == "__main__":
    main()
