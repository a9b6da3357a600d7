"""
Communication adapter interfaces

Transports decode wire bytes into request envelopes, hand them to a Dispatcher
and encode the reply. Application code does not change when the transport does.
"""

import abc
from typing import Any, Dict


class ClientAdapterInterface(abc.ABC):
    """Client adapter interface, methods all client adapters must implement"""

    @abc.abstractmethod
    def call(self, method: str, params: Any = None) -> Dict[str, Any]:
        """Send an RPC request and wait for the response envelope

        Args:
            method: Dotted method name
            params: Positional (list) or named (dict) parameters, omitted when None

        Returns:
            Dict: JSON-RPC response envelope

        Raises:
            TimeoutError: Request timed out
            ConnectionError: Connection failed
            ValueError: Invalid response
        """
        pass

    @abc.abstractmethod
    def close(self) -> None:
        """Close connection and release resources"""
        pass


class ServerAdapterInterface(abc.ABC):
    """Server adapter interface, methods all server adapters must implement"""

    @abc.abstractmethod
    def register_service(self, service: Any):
        """Serve a service object graph

        Args:
            service: Object graph of callables, values and namespaces, or a
                prebuilt Dispatcher
        """
        pass

    @abc.abstractmethod
    def start(self, threaded: bool = True):
        """Start the server

        Args:
            threaded: Whether to run in a separate thread
        """
        pass

    @abc.abstractmethod
    def stop(self):
        """Stop the server loop"""
        pass

    @abc.abstractmethod
    def close(self):
        """Release sockets and other resources"""
        pass
