"""
Explicit service registration

Builds the same definition tree as build_definition() from individually
registered handlers and values, with optional explicit parameter names.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Sequence

from seam_rpc.rpc.definition import CallableLeaf, Definition, ValueLeaf, build_definition
from seam_rpc.rpc.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Registry of named handlers and values

    Example:
        registry = ServiceRegistry()

        @registry.method("math.add")
        def add(a, b, done):
            done(None, a + b)

        registry.value("version", "1.2.0")
        dispatcher = registry.dispatcher()
    """

    def __init__(self):
        self._root: Dict[str, Any] = {}

    def _parent(self, name: str) -> Dict[str, Any]:
        if not name or "" in name.split("."):
            raise ValueError(f"Invalid method name: {name!r}")

        node = self._root
        *namespaces, leaf_name = name.split(".")
        for part in namespaces:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise ValueError(f"Cannot register {name!r}: {part!r} is already a leaf")

        if leaf_name in node:
            raise ValueError(f"{name!r} is already registered")
        return node

    def register(self,
                 name: str,
                 handler: Callable,
                 parameter_names: Optional[Sequence[str]] = None) -> None:
        """Register a handler under a dotted name

        Args:
            name: Dotted method name, e.g. "math.add"
            handler: Callable taking its arguments followed by a completion callback
            parameter_names: Declared names used for named params; extracted
                from the handler when omitted
        """
        if not callable(handler):
            raise TypeError(f"Handler for {name!r} is not callable")

        if parameter_names is None:
            leaf = build_definition(handler)
        else:
            leaf = CallableLeaf(params=tuple(parameter_names), invoke=handler)

        self._parent(name)[name.split(".")[-1]] = leaf
        logger.debug(f"Registered RPC method: {name} {list(leaf.params)}")

    def method(self,
               name: Optional[str] = None,
               parameter_names: Optional[Sequence[str]] = None) -> Callable[[Callable], Callable]:
        """Decorator form of register(); defaults to the function name"""
        def decorator(fn: Callable) -> Callable:
            self.register(name or fn.__name__, fn, parameter_names)
            return fn
        return decorator

    def value(self, name: str, value: Any) -> None:
        """Register a static value under a dotted name"""
        self._parent(name)[name.split(".")[-1]] = ValueLeaf(value=value)

    def definition(self) -> Definition:
        """Snapshot of the registrations as a read-only definition tree"""
        def freeze(node):
            if isinstance(node, dict):
                return MappingProxyType({key: freeze(child) for key, child in node.items()})
            return node
        return freeze(self._root)

    def dispatcher(self) -> Dispatcher:
        return Dispatcher.from_definition(self.definition())
