# aeplib/client.py
import json
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from .api import CustomMethod, Resource
from .cases import kebab_to_camel_case, lower_first
from .exceptions import APIError, MissingIdError, NoValidListKeyError, TransportError
from .logger import log_request, log_response, logger
from .paths import base_path, custom_method_path, join_path

DEFAULT_TIMEOUT = float(os.getenv("AEPLIB_HTTP_TIMEOUT_SECONDS", "30"))

RequestLoggingFunction = Callable[[Any, requests.Request], None]
ResponseLoggingFunction = Callable[[Any, requests.Response], None]

_LIST_ITEM = TypeAdapter(Dict[str, Any])


def _lower_camel_plural(resource: Resource) -> str:
    camel = kebab_to_camel_case(resource.plural)
    return lower_first(camel) if len(camel) > 1 else ""


# Envelope keys a list response may nest its items under, tried in order.
LIST_KEY_STRATEGIES = (
    lambda resource: "results",
    lambda resource: resource.plural,
    lambda resource: kebab_to_camel_case(resource.plural),
    _lower_camel_plural,
)


def check_errors(body: Any) -> None:
    """Raise APIError if the decoded body reports an error, whatever the HTTP status was"""
    if isinstance(body, dict) and body.get("error"):
        raise APIError(f"Returned errors: {json.dumps(body['error'], default=str)}", error=body["error"])


def _decode(response: requests.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def _decode_items(items: List[Any]) -> List[Dict[str, Any]]:
    decoded = []
    for item in items:
        try:
            decoded.append(_LIST_ITEM.validate_python(item, strict=True))
        except ValidationError:
            continue
    return decoded


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by every call of a Client.

    The timeout default is read from AEPLIB_HTTP_TIMEOUT_SECONDS when the
    module is imported; a value that is not a number raises ValueError at
    import time.
    """
    session: requests.Session
    headers: Mapping[str, str]
    request_logging_function: RequestLoggingFunction
    response_logging_function: ResponseLoggingFunction
    timeout: float = DEFAULT_TIMEOUT


class Client:
    """
    Runs CRUD and custom operations for resource descriptors.

    The client keeps nothing but its ClientConfig; every call is one
    request/response exchange. `ctx` is opaque and only handed to the
    logging hooks.
    """

    def __init__(
        self,
        session: requests.Session,
        headers: Dict[str, str],
        request_logging_function: RequestLoggingFunction = log_request,
        response_logging_function: ResponseLoggingFunction = log_response,
        config: Dict = None,
    ):
        settings = {
            "timeout": DEFAULT_TIMEOUT,
            **(config or {})
        }
        self.config = ClientConfig(
            session=session,
            headers=MappingProxyType(dict(headers)),
            request_logging_function=request_logging_function,
            response_logging_function=response_logging_function,
            timeout=settings["timeout"],
        )

    def create(
        self,
        ctx: Any,
        resource: Resource,
        server_url: str,
        body: Dict[str, Any],
        parameters: Dict[str, str],
    ) -> Any:
        suffix = ""
        if resource.create_method and resource.create_method.supports_user_settable_create:
            resource_id = body.get("id")
            if not resource_id:
                raise MissingIdError(f"id field not found in {json.dumps(body, default=str)}")
            if isinstance(resource_id, str):
                suffix = f"?id={resource_id}"

        url = base_path(resource, server_url, parameters, suffix)
        return self._make_request(ctx, "POST", url, body)

    def list(
        self,
        ctx: Any,
        resource: Resource,
        server_url: str,
        parameters: Dict[str, str],
    ) -> List[Dict[str, Any]]:
        url = base_path(resource, server_url, parameters)
        response = self._make_request(ctx, "GET", url)

        if isinstance(response, dict):
            for strategy in LIST_KEY_STRATEGIES:
                key = strategy(resource)
                if key and isinstance(response.get(key), list):
                    logger.debug("list %s: items found under %r", resource.plural, key)
                    return _decode_items(response[key])

        raise NoValidListKeyError("No valid list key was found")

    def get(self, ctx: Any, server_url: str, path: str) -> Any:
        return self._make_request(ctx, "GET", join_path(server_url, path))

    def get_with_full_url(self, ctx: Any, url: str) -> Any:
        return self._make_request(ctx, "GET", url)

    def update(self, ctx: Any, server_url: str, path: str, body: Dict[str, Any]) -> Any:
        return self._make_request(ctx, "PATCH", join_path(server_url, path), body)

    def delete(self, ctx: Any, server_url: str, path: str) -> None:
        self._make_request(ctx, "DELETE", join_path(server_url, path))

    def custom(
        self,
        ctx: Any,
        server_url: str,
        path: str,
        custom_method: CustomMethod,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Invoke a custom method, e.g. POST {server}/books/1:archive"""
        method = custom_method.method.upper()
        url = custom_method_path(join_path(server_url, path), custom_method.name)
        return self._make_request(ctx, method, url, None if method == "GET" else body)

    def _make_request(self, ctx: Any, method: str, url: str, body: Optional[Dict[str, Any]] = None) -> Any:
        if body is not None:
            # some backends reject explicit nulls
            body = {key: value for key, value in body.items() if value is not None}

        headers = dict(self.config.headers)
        request = requests.Request(method, url, headers=headers, json=body)
        self.config.request_logging_function(ctx, request)

        session = self.config.session
        prepared = session.prepare_request(request)
        settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
        try:
            response = session.send(prepared, timeout=self.config.timeout, **settings)
            response.raise_for_status()
        except requests.HTTPError as e:
            if e.response is None:
                raise
            self.config.response_logging_function(ctx, e.response)
            request_info = {"method": method, "url": url, "headers": headers, "data": body}
            raise TransportError(
                f"Request failed: {json.dumps(_decode(e.response), default=str)} "
                f"for request {json.dumps(request_info, default=str)}",
                response=e.response,
                request=request_info,
            ) from e

        self.config.response_logging_function(ctx, response)
        data = _decode(response)
        check_errors(data)
        return data
