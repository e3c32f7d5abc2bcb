"""
Pools API module for stake pool listings, blocks, delegators, history, metadata, relays and updates.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import HEADER_AMOUNTS_AS_STRING, RequestArgs, assert_param_exists, check_order, render_path
from maestro.enums import Order


class PoolsRequests(BaseRequests):
    """Request builders for /pools endpoints."""

    def list_pools(
        self, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        return self.build("GET", "/pools", {"count": count, "cursor": cursor}, options)

    def pool_blocks(
        self,
        pool_id: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("pool_blocks", "pool_id", pool_id)
        path = render_path("/pools/{pool_id}/blocks", pool_id=pool_id)
        query = {"epoch_no": epoch_no, "count": count, "order": check_order(order), "cursor": cursor}
        return self.build("GET", path, query, options)

    def pool_delegators(
        self, pool_id: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("pool_delegators", "pool_id", pool_id)
        path = render_path("/pools/{pool_id}/delegators", pool_id=pool_id)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def pool_history(
        self,
        pool_id: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("pool_history", "pool_id", pool_id)
        path = render_path("/pools/{pool_id}/history", pool_id=pool_id)
        query = {"epoch_no": epoch_no, "count": count, "order": check_order(order), "cursor": cursor}
        return self.build("GET", path, query, options)

    def pool_info(self, pool_id: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("pool_info", "pool_id", pool_id)
        path = render_path("/pools/{pool_id}/info", pool_id=pool_id)
        return self.build("GET", path, options=options, extra_headers=HEADER_AMOUNTS_AS_STRING)

    def pool_metadata(self, pool_id: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("pool_metadata", "pool_id", pool_id)
        return self.build("GET", render_path("/pools/{pool_id}/metadata", pool_id=pool_id), options=options)

    def pool_relays(self, pool_id: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("pool_relays", "pool_id", pool_id)
        return self.build("GET", render_path("/pools/{pool_id}/relays", pool_id=pool_id), options=options)

    def pool_updates(self, pool_id: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("pool_updates", "pool_id", pool_id)
        return self.build("GET", render_path("/pools/{pool_id}/updates", pool_id=pool_id), options=options)


class PoolsAPI(BaseAPI):
    """Pools endpoints. Query keyword arguments mirror PoolsRequests."""

    requests_class = PoolsRequests

    def list_pools(self, **query) -> dict:
        """Registered stake pools (GET /pools)."""
        return self._send(self.requests.list_pools(**query))

    def pool_blocks(self, pool_id: str, **query) -> dict:
        return self._send(self.requests.pool_blocks(pool_id, **query))

    def pool_delegators(self, pool_id: str, **query) -> dict:
        return self._send(self.requests.pool_delegators(pool_id, **query))

    def pool_history(self, pool_id: str, **query) -> dict:
        """Per-epoch pool history (GET /pools/{pool_id}/history)."""
        return self._send(self.requests.pool_history(pool_id, **query))

    def pool_info(self, pool_id: str, options: dict | None = None) -> dict:
        return self._send(self.requests.pool_info(pool_id, options))

    def pool_metadata(self, pool_id: str, options: dict | None = None) -> dict:
        return self._send(self.requests.pool_metadata(pool_id, options))

    def pool_relays(self, pool_id: str, options: dict | None = None) -> dict:
        return self._send(self.requests.pool_relays(pool_id, options))

    def pool_updates(self, pool_id: str, options: dict | None = None) -> dict:
        return self._send(self.requests.pool_updates(pool_id, options))
