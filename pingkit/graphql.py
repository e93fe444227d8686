"""GraphQL request and response handling, plus cookie lookup."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .jsonutil import _marshal

log = logging.getLogger(__name__)


class GraphQLRequestError(Exception):
    """A GraphQL request failed or its response could not be read."""


@dataclass
class GraphQLRequest:
    """A GraphQL operation together with the key its result lives under."""

    operation_name: str
    query: str
    variables: Any = None
    response_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the request body; ``response_type`` is not part of it."""
        variables = self.variables
        to_dict = getattr(variables, "to_dict", None)
        if callable(to_dict):
            variables = to_dict()
        return {
            "operationName": self.operation_name,
            "variables": variables,
            "query": self.query,
        }


class GraphQLResponse(dict):
    """The object returned under the operation's key in ``data``."""

    def is_success(self) -> bool:
        """Return the ``success`` flag, or True when the response has none."""
        return bool(self.get("success", True))

    def message(self) -> str:
        """Return the response message, or an empty string."""
        return str(self.get("message") or "")


def new_graphql_response(body: Any, key: str) -> GraphQLResponse:
    """Parse a raw response body and return the object found at ``data[key]``.

    ``body`` may be text, bytes or a readable file-like object.
    """
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8")
    log.debug("The response body is: %s", body)
    try:
        root = json.loads(body)
    except ValueError as exc:
        raise GraphQLRequestError(f"invalid response body: {exc}") from exc
    if not isinstance(root, dict):
        raise GraphQLRequestError(
            f"request failed with response: {_marshal(root, sort_keys=True)}"
        )
    data = root.get("data")
    if not isinstance(data, dict):
        raise GraphQLRequestError(
            f"request failed with response: {_marshal(root, sort_keys=True)}"
        )
    payload = data.get(key)
    if not isinstance(payload, dict):
        raise GraphQLRequestError(f"response holds no object under {key!r}")
    return GraphQLResponse(payload)


@dataclass
class GraphQLExecutor:
    """Runs GraphQL requests over a transport.

    ``transport`` receives the JSON request body and returns the raw
    response body.
    """

    transport: Callable[[str], Any]

    def make_graphql_request(self, request: GraphQLRequest) -> GraphQLResponse:
        """Send ``request`` and return its result; raise if it did not succeed."""
        body = self.transport(_marshal(request.to_dict()))
        response = new_graphql_response(body, request.response_type)
        if not response.is_success():
            raise GraphQLRequestError(
                response.message() or f"{request.operation_name} was not successful"
            )
        return response


def retrieve_cookie(set_cookie_headers: Iterable[str] | None, name: str) -> str:
    """Return the value of cookie ``name`` from a list of Set-Cookie headers."""
    headers = list(set_cookie_headers or [])
    if not headers:
        raise LookupError("there is no cookie in the response")
    prefix = name + "="
    for cookie in headers:
        if cookie.startswith(prefix):
            pair = cookie.split(";", 1)[0]
            return pair.split("=")[1]
    raise LookupError(f"cookie '{name}' does not exist in the response")