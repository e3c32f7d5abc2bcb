"""
Ecosystem API module (ADA Handle resolution).
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path


class EcosystemRequests(BaseRequests):
    def ada_handle_resolve(self, handle: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("ada_handle_resolve", "handle", handle)
        return self.build("GET", render_path("/ecosystem/adahandle/{handle}", handle=handle), options=options)


class EcosystemAPI(BaseAPI):
    """Ecosystem endpoints."""

    requests_class = EcosystemRequests

    def ada_handle_resolve(self, handle: str, options: dict | None = None) -> dict:
        """Resolve an ADA Handle to its address (GET /ecosystem/adahandle/{handle})."""
        return self._send(self.requests.ada_handle_resolve(handle, options))
