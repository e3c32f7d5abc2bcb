"""
Scripts API module.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path


class ScriptsRequests(BaseRequests):
    def script_by_hash(self, script_hash: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("script_by_hash", "script_hash", script_hash)
        return self.build("GET", render_path("/scripts/{script_hash}", script_hash=script_hash), options=options)


class ScriptsAPI(BaseAPI):
    """Scripts endpoints."""

    requests_class = ScriptsRequests

    def script_by_hash(self, script_hash: str, options: dict | None = None) -> dict:
        """Script bytes and type for a script hash (GET /scripts/{script_hash})."""
        return self._send(self.requests.script_by_hash(script_hash, options))
