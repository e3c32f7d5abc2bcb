"""
Blocks API module.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path


class BlocksRequests(BaseRequests):
    def block_info(self, hash_or_height: str | int, options: dict | None = None) -> RequestArgs:
        assert_param_exists("block_info", "hash_or_height", hash_or_height)
        path = render_path("/blocks/{hash_or_height}", hash_or_height=hash_or_height)
        return self.build("GET", path, options=options)

    def block_latest(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/blocks/latest", options=options)


class BlocksAPI(BaseAPI):
    """Blocks endpoints."""

    requests_class = BlocksRequests

    def block_info(self, hash_or_height: str | int, options: dict | None = None) -> dict:
        """Block by hash or height (GET /blocks/{hash_or_height})."""
        return self._send(self.requests.block_info(hash_or_height, options))

    def block_latest(self, options: dict | None = None) -> dict:
        """Most recent block (GET /blocks/latest)."""
        return self._send(self.requests.block_latest(options))
