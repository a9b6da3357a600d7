"""
Method definition tree

Walks a service object graph once and classifies every reachable member as a
callable leaf, a value leaf or a namespace. The resulting tree is read-only and
is shared by every request dispatched against the service.
"""

import datetime
import logging
import numbers
import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from seam_rpc.rpc.errors import ExtractionError
from seam_rpc.rpc.introspection import parameter_names

logger = logging.getLogger(__name__)

# Leaf types
FUNCTION_TYPE = "function"
VALUE_TYPE = "value"

# Reserved introspection method, not a valid identifier so it never collides
DEFINITION_METHOD = "@definition"


@dataclass(frozen=True)
class CallableLeaf:
    """Callable endpoint with its declared parameter names"""
    params: Tuple[str, ...]
    invoke: Callable

    type = FUNCTION_TYPE


@dataclass(frozen=True)
class ValueLeaf:
    """Static value endpoint"""
    value: Any

    type = VALUE_TYPE


Leaf = Union[CallableLeaf, ValueLeaf]
Definition = Union[Leaf, Mapping[str, Any]]


def is_value(prop: Any) -> bool:
    """Closed leaf-value predicate: boolean, number, string, date or array"""
    return isinstance(prop, (bool, numbers.Number, str, datetime.date, list, tuple))


def is_leaf(node: Any) -> bool:
    return isinstance(node, (CallableLeaf, ValueLeaf))


def _is_service_class(cls: type) -> bool:
    if cls is object:
        return False
    module = cls.__module__
    return module == "__main__" or module.partition(".")[0] not in sys.stdlib_module_names


def _members(prop: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(prop, Mapping):
        yield from prop.items()
        return

    # Objects of builtin and standard library types (None included) are opaque
    classes = [cls for cls in type(prop).__mro__ if _is_service_class(cls)]
    if not classes:
        return

    names = list(getattr(prop, "__dict__", {}))
    for cls in classes:
        names.extend(vars(cls))

    seen = set()
    for name in names:
        if name.startswith("_") or name in seen:
            continue
        seen.add(name)
        yield name, getattr(prop, name)


def _callable_leaf(fn: Callable) -> CallableLeaf:
    try:
        params = tuple(parameter_names(fn))
    except ExtractionError as e:
        logger.warning(f"Registering {fn!r} without parameter names: {e}")
        params = ()
    return CallableLeaf(params=params, invoke=fn)


def build_definition(service: Any) -> Definition:
    """Build the method definition tree of a service

    Members are classified depth-first in priority order: callable, leaf value,
    namespace. Service graphs must be acyclic.

    Args:
        service: Root of the service graph (mapping, object, callable or value)

    Returns:
        CallableLeaf, ValueLeaf, or a read-only mapping of member name to subtree
    """
    if callable(service):
        return _callable_leaf(service)

    if is_value(service):
        return ValueLeaf(value=service)

    children = {}
    for key, member in _members(service):
        children[str(key)] = build_definition(member)

    return MappingProxyType(children)


def resolve(definition: Definition, method: Any) -> Optional[Definition]:
    """Look up a dotted method path in the definition tree

    Returns:
        The node at that path, or None when the path does not resolve
    """
    if not isinstance(method, str):
        return None

    node = definition
    for part in method.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]

    return node


def describe(definition: Definition) -> Any:
    """Render the definition tree as plain data for the introspection method"""
    if isinstance(definition, CallableLeaf):
        return {"type": FUNCTION_TYPE, "params": list(definition.params)}

    if isinstance(definition, ValueLeaf):
        return {"type": VALUE_TYPE, "value": definition.value}

    description: Dict[str, Any] = {}
    for key, node in definition.items():
        description[key] = describe(node)
    return description
