"""
Request parameter mapping
"""

from typing import Any, List, Mapping, Sequence

from seam_rpc.rpc.errors import INVALID_REQUEST, RpcError


def map_parameters(params: Any, names: Sequence[str]) -> List[Any]:
    """Convert request params into positional arguments

    Array params are used verbatim. Object params are ordered by the declared
    names; a declared name missing from the object is dropped rather than
    padded, so the argument list gets shorter.

    Args:
        params: ``params`` member of the request (None when absent)
        names: Declared parameter names of the target callable

    Returns:
        List: Positional arguments

    Raises:
        RpcError: params is neither absent, an array nor an object
    """
    if params is None:
        return []

    if isinstance(params, (list, tuple)):
        return list(params)

    if isinstance(params, Mapping):
        return [params[name] for name in names if name in params]

    raise RpcError(INVALID_REQUEST, "The params member must be an array or an object")
