"""
HTTP request handler and dispatcher for Maestro API calls.
Wraps a requests session (optionally rate limited) and turns built RequestArgs into deferred calls.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable

import requests
from requests_ratelimiter import LimiterSession

if TYPE_CHECKING:
    from maestro.common import RequestArgs
    from maestro.configuration import Configuration

logger = logging.getLogger(__name__)


class RequestHandler:
    def __init__(self, requests_per_second: float | None = None):
        if requests_per_second:
            self.session = LimiterSession(per_second=requests_per_second, per_host=False)
        else:
            self.session = requests.Session()

    def request(self, method: str, url: str, **kwargs) -> Any:
        """
        Perform one HTTP call and decode the body.
        Non-2xx responses raise requests.HTTPError; JSON bodies are parsed, anything else comes back as text.
        """
        logger.debug("%s %s", method, url)
        resp = self.session.request(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        resp.raise_for_status()
        return self.decode(resp)

    @staticmethod
    def decode(resp: requests.Response) -> Any:
        content_type = resp.headers.get("Content-Type", "")
        if "json" in content_type.lower():
            return resp.json()
        return resp.text

    def close(self):
        self.session.close()


def create_request_function(request_args: "RequestArgs", configuration: "Configuration") -> Callable[..., Any]:
    """
    Bind built request arguments to the configured handler and base URL.
    Nothing is sent until the returned callable is invoked.
    """

    def request(http: RequestHandler | None = None, base_url: str | None = None) -> Any:
        handler = http or configuration.http
        options = dict(request_args.options)
        method = options.pop("method")
        url = (base_url or configuration.base_url) + request_args.url
        return handler.request(method, url, **options)

    return request
