from maestro.client import MaestroClient
from maestro.common import RequestArgs, RequiredError
from maestro.configuration import Configuration
from maestro.enums import MaestroNetwork, Order
from maestro.handle_requests import RequestHandler, create_request_function

__all__ = [
    "Configuration",
    "MaestroClient",
    "MaestroNetwork",
    "Order",
    "RequestArgs",
    "RequestHandler",
    "RequiredError",
    "create_request_function",
]
