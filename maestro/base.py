"""
Base classes shared by every resource group: a request builder bound to a Configuration
and a façade bound to the root client.
"""
from typing import TYPE_CHECKING, Any

from maestro.common import (
    RequestArgs,
    build_query_string,
    build_request_options,
    serialize_data_if_needed,
    to_path_string,
)
from maestro.handle_requests import create_request_function

if TYPE_CHECKING:
    from maestro.client import MaestroClient
    from maestro.configuration import Configuration


class BaseRequests:
    """Builds RequestArgs; performs no I/O."""

    def __init__(self, configuration: "Configuration"):
        self.configuration = configuration

    def build(
        self,
        method: str,
        path: str,
        query: dict | None = None,
        options: dict | None = None,
        *,
        content_type: str | None = None,
        json_body: Any = None,
        raw_body: bytes | None = None,
        extra_headers: dict | None = None,
    ) -> RequestArgs:
        request_options = build_request_options(
            method, self.configuration, options, content_type=content_type, extra_headers=extra_headers
        )
        if json_body is not None:
            request_options["data"] = serialize_data_if_needed(json_body, request_options, self.configuration)
        elif raw_body is not None:
            request_options["data"] = raw_body
        return RequestArgs(url=to_path_string(path, build_query_string(query)), options=request_options)


class BaseAPI:
    """Façade base: builds, binds and immediately sends a request."""

    requests_class: type[BaseRequests] = BaseRequests

    def __init__(self, client: "MaestroClient"):
        self.client = client
        self.requests = self.requests_class(client.configuration)

    def _send(self, request_args: RequestArgs) -> Any:
        return create_request_function(request_args, self.client.configuration)()
