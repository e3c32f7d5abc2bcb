"""
Assets API module for native assets and minting policies: holders, transactions, updates and UTxOs.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, check_order, render_path
from maestro.enums import Order


class AssetsRequests(BaseRequests):
    """Request builders for /assets endpoints."""

    def asset_info(self, asset: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("asset_info", "asset", asset)
        return self.build("GET", render_path("/assets/{asset}", asset=asset), options=options)

    def asset_accounts(
        self, asset: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("asset_accounts", "asset", asset)
        path = render_path("/assets/{asset}/accounts", asset=asset)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def asset_addresses(
        self, asset: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("asset_addresses", "asset", asset)
        path = render_path("/assets/{asset}/addresses", asset=asset)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def asset_txs(
        self,
        asset: str,
        *,
        from_height: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("asset_txs", "asset", asset)
        path = render_path("/assets/{asset}/transactions", asset=asset)
        query = {"from_height": from_height, "count": count, "order": check_order(order), "cursor": cursor}
        return self.build("GET", path, query, options)

    def asset_updates(
        self,
        asset: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("asset_updates", "asset", asset)
        path = render_path("/assets/{asset}/updates", asset=asset)
        return self.build("GET", path, {"count": count, "order": check_order(order), "cursor": cursor}, options)

    def asset_utxos(
        self,
        asset: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("asset_utxos", "asset", asset)
        path = render_path("/assets/{asset}/utxos", asset=asset)
        query = {"count": count, "order": check_order(order), "from": from_, "to": to, "cursor": cursor}
        return self.build("GET", path, query, options)

    def policy_info(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("policy_info", "policy", policy)
        path = render_path("/assets/policy/{policy}", policy=policy)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def policy_accounts(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("policy_accounts", "policy", policy)
        path = render_path("/assets/policy/{policy}/accounts", policy=policy)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def policy_addresses(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("policy_addresses", "policy", policy)
        path = render_path("/assets/policy/{policy}/addresses", policy=policy)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def policy_txs(
        self,
        policy: str,
        *,
        from_height: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("policy_txs", "policy", policy)
        path = render_path("/assets/policy/{policy}/txs", policy=policy)
        query = {"from_height": from_height, "count": count, "order": check_order(order), "cursor": cursor}
        return self.build("GET", path, query, options)

    def policy_utxos(
        self,
        policy: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("policy_utxos", "policy", policy)
        path = render_path("/assets/policy/{policy}/utxos", policy=policy)
        query = {"count": count, "order": check_order(order), "from": from_, "to": to, "cursor": cursor}
        return self.build("GET", path, query, options)


class AssetsAPI(BaseAPI):
    """Assets endpoints. Query keyword arguments mirror AssetsRequests."""

    requests_class = AssetsRequests

    def asset_info(self, asset: str, options: dict | None = None) -> dict:
        """Asset details (GET /assets/{asset}); `asset` is policy ID + hex asset name."""
        return self._send(self.requests.asset_info(asset, options))

    def asset_accounts(self, asset: str, **query) -> dict:
        return self._send(self.requests.asset_accounts(asset, **query))

    def asset_addresses(self, asset: str, **query) -> dict:
        return self._send(self.requests.asset_addresses(asset, **query))

    def asset_txs(self, asset: str, **query) -> dict:
        return self._send(self.requests.asset_txs(asset, **query))

    def asset_updates(self, asset: str, **query) -> dict:
        """Mint and burn transactions of the asset."""
        return self._send(self.requests.asset_updates(asset, **query))

    def asset_utxos(self, asset: str, **query) -> dict:
        return self._send(self.requests.asset_utxos(asset, **query))

    def policy_info(self, policy: str, **query) -> dict:
        """Every asset minted under a policy (GET /assets/policy/{policy})."""
        return self._send(self.requests.policy_info(policy, **query))

    def policy_accounts(self, policy: str, **query) -> dict:
        return self._send(self.requests.policy_accounts(policy, **query))

    def policy_addresses(self, policy: str, **query) -> dict:
        return self._send(self.requests.policy_addresses(policy, **query))

    def policy_txs(self, policy: str, **query) -> dict:
        return self._send(self.requests.policy_txs(policy, **query))

    def policy_utxos(self, policy: str, **query) -> dict:
        return self._send(self.requests.policy_utxos(policy, **query))
