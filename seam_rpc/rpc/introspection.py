"""
Parameter name extraction

Recovers the ordered formal parameter names of a callable from its declaration.
"""

import inspect
from typing import Callable, List

from seam_rpc.rpc.errors import ExtractionError


def _bare_name(name: str) -> str:
    """Strip one symmetric marker pair, e.g. ``_unused_`` -> ``unused``"""
    if len(name) > 2 and name[0] == name[-1] and not name[0].isalnum():
        return name[1:-1]
    return name


def parameter_names(fn: Callable) -> List[str]:
    """Get the declared parameter names of a callable

    Args:
        fn: Function, bound method or other callable

    Returns:
        List: Parameter names in declaration order (duplicates and markers
        aside, exactly as declared)

    Raises:
        ExtractionError: The callable exposes no parsable declaration
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise ExtractionError(f"Cannot extract parameters of {fn!r}: {e}") from e

    return [_bare_name(name) for name in signature.parameters]
