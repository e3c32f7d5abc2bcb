"""
Accounts API module for stake-account information, history, rewards and delegation updates.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path


class AccountsRequests(BaseRequests):
    """Request builders for /accounts endpoints."""

    def account_info(self, stake_addr: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("account_info", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}", stake_addr=stake_addr)
        return self.build("GET", path, options=options)

    def account_addresses(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("account_addresses", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}/addresses", stake_addr=stake_addr)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def account_assets(
        self,
        stake_addr: str,
        *,
        policy: str | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("account_assets", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}/assets", stake_addr=stake_addr)
        return self.build("GET", path, {"policy": policy, "count": count, "cursor": cursor}, options)

    def account_history(
        self,
        stake_addr: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("account_history", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}/history", stake_addr=stake_addr)
        return self.build("GET", path, {"epoch_no": epoch_no, "count": count, "cursor": cursor}, options)

    def account_rewards(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("account_rewards", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}/rewards", stake_addr=stake_addr)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)

    def account_updates(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("account_updates", "stake_addr", stake_addr)
        path = render_path("/accounts/{stake_addr}/updates", stake_addr=stake_addr)
        return self.build("GET", path, {"count": count, "cursor": cursor}, options)


class AccountsAPI(BaseAPI):
    """Accounts endpoints."""

    requests_class = AccountsRequests

    def account_info(self, stake_addr: str, options: dict | None = None) -> dict:
        """Summary of a stake account (GET /accounts/{stake_addr})."""
        return self._send(self.requests.account_info(stake_addr, options))

    def account_addresses(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Addresses seen on-chain using the stake key (GET /accounts/{stake_addr}/addresses)."""
        return self._send(self.requests.account_addresses(stake_addr, count=count, cursor=cursor, options=options))

    def account_assets(
        self,
        stake_addr: str,
        *,
        policy: str | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Native assets held under the stake key, optionally filtered by policy."""
        return self._send(
            self.requests.account_assets(stake_addr, policy=policy, count=count, cursor=cursor, options=options)
        )

    def account_history(
        self,
        stake_addr: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Per-epoch history for the stake key (GET /accounts/{stake_addr}/history)."""
        return self._send(
            self.requests.account_history(stake_addr, epoch_no=epoch_no, count=count, cursor=cursor, options=options)
        )

    def account_rewards(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Member, leader and refund rewards (GET /accounts/{stake_addr}/rewards)."""
        return self._send(self.requests.account_rewards(stake_addr, count=count, cursor=cursor, options=options))

    def account_updates(
        self, stake_addr: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Registration, deregistration, delegation and withdrawal events for the stake key."""
        return self._send(self.requests.account_updates(stake_addr, count=count, cursor=cursor, options=options))
