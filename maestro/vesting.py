"""
Vesting contract API module: lock assets for a beneficiary, collect unlocked installments and inspect state.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path
from maestro.enums import ContentType


class VestingRequests(BaseRequests):
    def vesting_collect(self, beneficiary: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("vesting_collect", "beneficiary", beneficiary)
        path = render_path("/contracts/vesting/collect/{beneficiary}", beneficiary=beneficiary)
        return self.build("POST", path, options=options)

    def vesting_lock(self, lock_request: dict, options: dict | None = None) -> RequestArgs:
        assert_param_exists("vesting_lock", "lock_request", lock_request)
        return self.build(
            "POST",
            "/contracts/vesting/lock",
            options=options,
            content_type=ContentType.JSON.value,
            json_body=lock_request,
        )

    def vesting_state(self, beneficiary: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("vesting_state", "beneficiary", beneficiary)
        path = render_path("/contracts/vesting/state/{beneficiary}", beneficiary=beneficiary)
        return self.build("GET", path, options=options)


class VestingAPI(BaseAPI):
    """Vesting contract endpoints."""

    requests_class = VestingRequests

    def vesting_collect(self, beneficiary: str, options: dict | None = None) -> dict:
        """Build an unsigned transaction collecting unlocked funds (POST /contracts/vesting/collect/{beneficiary})."""
        return self._send(self.requests.vesting_collect(beneficiary, options))

    def vesting_lock(self, lock_request: dict, options: dict | None = None) -> dict:
        """
        Build an unsigned transaction locking assets (POST /contracts/vesting/lock).
        `lock_request` carries sender, beneficiary, asset_policy_id, asset_token_name,
        total_vesting_quantity, vesting_period_start, vesting_period_end,
        first_unlock_possible_after, total_installments and vesting_memo.
        """
        return self._send(self.requests.vesting_lock(lock_request, options))

    def vesting_state(self, beneficiary: str, options: dict | None = None) -> list:
        """Vesting positions for a beneficiary (GET /contracts/vesting/state/{beneficiary})."""
        return self._send(self.requests.vesting_state(beneficiary, options))
