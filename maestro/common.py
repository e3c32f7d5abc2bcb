"""
Shared request-construction helpers used by every endpoint builder.
Covers required-parameter checks, path templating, query flattening, header merging and body serialization.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from maestro.enums import Order

if TYPE_CHECKING:
    from maestro.configuration import Configuration

HEADER_AMOUNTS_AS_STRING = {"amounts-as-strings": "true"}

# encodeURIComponent leaves these unescaped
_PATH_SAFE = "-_.!~*'()"


class RequiredError(ValueError):
    """A required endpoint parameter was None."""

    def __init__(self, field: str, msg: str | None = None):
        super().__init__(msg or field)
        self.field = field


@dataclass
class RequestArgs:
    url: str
    options: dict[str, Any] = field(default_factory=dict)


def assert_param_exists(function_name: str, param_name: str, param_value: Any) -> None:
    if param_value is None:
        raise RequiredError(
            param_name,
            f"Required parameter {param_name} was null or undefined when calling {function_name}.",
        )


def encode_path_segment(value: Any) -> str:
    return quote(_stringify(value), safe=_PATH_SAFE)


def render_path(template: str, **params: Any) -> str:
    """Substitute `{name}` placeholders with percent-encoded values."""
    path = template
    for name, value in params.items():
        path = path.replace(f"{{{name}}}", encode_path_segment(value))
    return path


def set_flattened_query_params(pairs: list[tuple[str, str]], parameter: Any, key: str = "") -> None:
    """
    Append query pairs for `parameter` under `key`.
    Mappings become dotted keys, sequences repeat the key and None is dropped.
    """
    if parameter is None:
        return
    if isinstance(parameter, dict):
        for current_key, value in parameter.items():
            set_flattened_query_params(pairs, value, f"{key}.{current_key}" if key else str(current_key))
    elif isinstance(parameter, (list, tuple)):
        for item in parameter:
            set_flattened_query_params(pairs, item, key)
    else:
        pairs.append((key, _stringify(parameter)))


def build_query_string(*objects: Any) -> str:
    pairs: list[tuple[str, str]] = []
    for obj in objects:
        set_flattened_query_params(pairs, obj)
    return urlencode(pairs)


def to_path_string(path: str, query: str = "") -> str:
    return f"{path}?{query}" if query else path


def check_order(order: Order | str | None) -> str | None:
    if order is None:
        return None
    try:
        return Order(order).value
    except ValueError:
        raise ValueError(f"order must be one of {[o.value for o in Order]}, got {order!r}") from None


def build_request_options(
    method: str,
    configuration: "Configuration",
    options: dict | None,
    content_type: str | None = None,
    extra_headers: dict | None = None,
) -> dict[str, Any]:
    """
    Merge base options with per-call overrides and assemble headers.
    Precedence for a header key: extra_headers > call options > base options > api-key/content-type.
    """
    options = options or {}
    base_options = configuration.base_options or {}
    request_options: dict[str, Any] = {"method": method, **base_options, **options}

    computed = {"api-key": configuration.api_key}
    if content_type:
        computed["Content-Type"] = content_type

    request_options["headers"] = {
        **computed,
        **(base_options.get("headers") or {}),
        **(options.get("headers") or {}),
        **(extra_headers or {}),
    }
    return request_options


def serialize_data_if_needed(value: Any, request_options: dict, configuration: "Configuration | None" = None) -> str:
    non_string = not isinstance(value, str)
    if non_string and configuration is not None:
        needs_serialization = configuration.is_json_mime(request_options["headers"].get("Content-Type"))
    else:
        needs_serialization = non_string
    if needs_serialization:
        return json.dumps(value if value is not None else {})
    return value or ""


def cbor_body(body: str | bytes | bytearray | memoryview | list[int] | tuple[int, ...]) -> bytes:
    """Hex strings are decoded; byte-likes and int sequences are copied as-is."""
    if isinstance(body, str):
        return bytes.fromhex(body)
    if isinstance(body, (bytes, bytearray, memoryview, list, tuple)):
        return bytes(body)
    raise TypeError(f"CBOR body must be a hex string or bytes, got {type(body).__name__}")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
