# aeplib/paths.py
import json
from typing import Dict

from .api import Resource
from .exceptions import MissingParameterError


def base_path(resource: Resource, server_url: str, parameters: Dict[str, str], suffix: str = "") -> str:
    """
    Build the collection URL for `resource` from its pattern elements.

    Placeholder values may be full resource names ("publishers/42"); only
    the trailing id is used. Values are not URL-encoded. The last pattern
    element is never emitted. `suffix` is appended as-is, so it must carry
    its own "?" or "&".
    """
    if server_url.endswith("/"):
        server_url = server_url[:-1]
    url_elems = [server_url]

    for i, elem in enumerate(resource.pattern_elems[:-1]):
        if i % 2 == 0:
            url_elems.append(elem)
            continue

        param_name = elem[1:-1]
        value = parameters.get(param_name)
        if not value:
            raise MissingParameterError(
                f"Parameter {param_name} not found in parameters {json.dumps(parameters, default=str)}",
                parameter=param_name,
            )
        url_elems.append(value.split("/")[-1] or value)

    return "/".join(url_elems) + suffix


def join_path(server_url: str, path: str) -> str:
    """Join a server URL and a resource path, dropping one leading "/" from the path"""
    if path.startswith("/"):
        path = path[1:]
    return f"{server_url}/{path}"


def custom_method_path(path: str, name: str) -> str:
    return f"{path}:{name}"
