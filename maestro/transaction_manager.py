"""
Transaction manager API module: submission (plain and turbo), submission state and history.
Submitted transactions are sent as raw CBOR bytes.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, cbor_body, render_path
from maestro.enums import ContentType

CborInput = str | bytes | bytearray | memoryview | list[int] | tuple[int, ...]


class TransactionManagerRequests(BaseRequests):
    """Request builders for /txmanager endpoints."""

    def tx_manager_history(
        self, *, count: int | None = None, page: int | None = None, options: dict | None = None
    ) -> RequestArgs:
        return self.build("GET", "/txmanager/history", {"count": count, "page": page}, options)

    def tx_manager_state(self, tx_hash: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_manager_state", "tx_hash", tx_hash)
        return self.build("GET", render_path("/txmanager/{tx_hash}/state", tx_hash=tx_hash), options=options)

    def tx_manager_submit(self, body: CborInput, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_manager_submit", "body", body)
        return self._submit("/txmanager", body, options)

    def tx_manager_turbo_submit(self, body: CborInput, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_manager_turbo_submit", "body", body)
        return self._submit("/txmanager/turbosubmit", body, options)

    def _submit(self, path: str, body: CborInput, options: dict | None) -> RequestArgs:
        return self.build("POST", path, options=options, content_type=ContentType.CBOR.value, raw_body=cbor_body(body))


class TransactionManagerAPI(BaseAPI):
    """Transaction manager endpoints."""

    requests_class = TransactionManagerRequests

    def tx_manager_history(self, *, count: int | None = None, page: int | None = None, options: dict | None = None):
        """Transactions previously submitted through the manager (GET /txmanager/history)."""
        return self._send(self.requests.tx_manager_history(count=count, page=page, options=options))

    def tx_manager_state(self, tx_hash: str, options: dict | None = None):
        """Lifecycle state of a managed transaction (GET /txmanager/{tx_hash}/state)."""
        return self._send(self.requests.tx_manager_state(tx_hash, options))

    def tx_manager_submit(self, body: CborInput, options: dict | None = None) -> str:
        """
        Submit a signed transaction (POST /txmanager).
        `body` is hex-encoded CBOR or the raw bytes. Returns the transaction hash.
        """
        return self._send(self.requests.tx_manager_submit(body, options))

    def tx_manager_turbo_submit(self, body: CborInput, options: dict | None = None) -> str:
        """Submit via the turbo path (POST /txmanager/turbosubmit); same body rules as tx_manager_submit."""
        return self._send(self.requests.tx_manager_turbo_submit(body, options))
