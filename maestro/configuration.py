"""
Client configuration: API key, network base URL, default request options and the shared HTTP handler.
"""
import os
import re
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

from maestro.enums import MaestroNetwork
from maestro.handle_requests import RequestHandler

_JSON_MIME = re.compile(r"^(application/json|[^;/ \t]+/[^;/ \t]+[+]json)[ \t]*(;.*)?$", re.IGNORECASE)


def resolve_network(network: MaestroNetwork | str) -> MaestroNetwork:
    if isinstance(network, MaestroNetwork):
        return network
    for net in MaestroNetwork:
        if net.value.lower() == str(network).lower():
            return net
    raise ValueError(f"Unsupported network {network!r}; expected one of {[n.value for n in MaestroNetwork]}")


def network_base_url(network: MaestroNetwork | str) -> str:
    net = resolve_network(network)
    return f"https://{net.value.lower()}.gomaestro-api.org/v1"


@dataclass(frozen=True, eq=False)
class Configuration:
    api_key: str
    network: MaestroNetwork | str = MaestroNetwork.MAINNET
    base_options: dict[str, Any] = field(default_factory=dict)
    base_url: str | None = None
    http: RequestHandler | None = None
    requests_per_second: float | None = None

    def __post_init__(self):
        # frozen: derived fields are filled in once here
        if self.base_url is None:
            object.__setattr__(self, "base_url", network_base_url(self.network))
        if self.http is None:
            object.__setattr__(self, "http", RequestHandler(requests_per_second=self.requests_per_second))
        if self.base_options is None:
            object.__setattr__(self, "base_options", {})

    @classmethod
    def from_env(cls, **overrides) -> "Configuration":
        """
        Build a configuration from MAESTRO_* environment variables (a local .env file is honoured).
        Keyword overrides win over the environment.
        """
        load_dotenv()
        api_key = overrides.pop("api_key", None) or os.getenv("MAESTRO_API_KEY")
        if not api_key:
            raise ValueError("MAESTRO_API_KEY not found in environment")
        rps = os.getenv("MAESTRO_REQUESTS_PER_SECOND")
        kwargs: dict[str, Any] = {
            "network": os.getenv("MAESTRO_NETWORK") or MaestroNetwork.MAINNET,
            "base_url": os.getenv("MAESTRO_BASE_URL") or None,
            "requests_per_second": float(rps) if rps else None,
        }
        kwargs.update(overrides)
        return cls(api_key=api_key, **kwargs)

    def is_json_mime(self, mime: str | None) -> bool:
        """True for application/json, vendor +json types and application/json-patch+json."""
        if mime is None:
            return False
        return bool(_JSON_MIME.match(mime)) or mime.lower() == "application/json-patch+json"
