"""
Transactions API module: transaction details, CBOR and output lookups.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path
from maestro.enums import ContentType


class TransactionsRequests(BaseRequests):
    """Request builders for /transactions endpoints."""

    def tx_info(self, tx_hash: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_info", "tx_hash", tx_hash)
        return self.build("GET", render_path("/transactions/{tx_hash}", tx_hash=tx_hash), options=options)

    def tx_cbor(self, tx_hash: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_cbor", "tx_hash", tx_hash)
        return self.build("GET", render_path("/transactions/{tx_hash}/cbor", tx_hash=tx_hash), options=options)

    def address_by_txo(self, tx_hash: str, index: int, options: dict | None = None) -> RequestArgs:
        assert_param_exists("address_by_txo", "tx_hash", tx_hash)
        assert_param_exists("address_by_txo", "index", index)
        path = render_path("/transactions/{tx_hash}/outputs/{index}/address", tx_hash=tx_hash, index=index)
        return self.build("GET", path, options=options)

    def txo_by_txo_ref(
        self, tx_hash: str, index: int, *, with_cbor: bool | None = None, options: dict | None = None
    ) -> RequestArgs:
        assert_param_exists("txo_by_txo_ref", "tx_hash", tx_hash)
        assert_param_exists("txo_by_txo_ref", "index", index)
        path = render_path("/transactions/{tx_hash}/outputs/{index}/txo", tx_hash=tx_hash, index=index)
        return self.build("GET", path, {"with_cbor": with_cbor}, options)

    def txos_by_txo_refs(
        self,
        txo_refs: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("txos_by_txo_refs", "txo_refs", txo_refs)
        return self.build(
            "POST",
            "/transactions/outputs",
            {"resolve_datums": resolve_datums, "with_cbor": with_cbor},
            options,
            content_type=ContentType.JSON.value,
            json_body=txo_refs,
        )


class TransactionsAPI(BaseAPI):
    """Transactions endpoints."""

    requests_class = TransactionsRequests

    def tx_info(self, tx_hash: str, options: dict | None = None) -> dict:
        """Transaction details (GET /transactions/{tx_hash})."""
        return self._send(self.requests.tx_info(tx_hash, options))

    def tx_cbor(self, tx_hash: str, options: dict | None = None) -> dict:
        """Raw CBOR of a transaction (GET /transactions/{tx_hash}/cbor)."""
        return self._send(self.requests.tx_cbor(tx_hash, options))

    def address_by_txo(self, tx_hash: str, index: int, options: dict | None = None) -> dict:
        """Address holding an output (GET /transactions/{tx_hash}/outputs/{index}/address)."""
        return self._send(self.requests.address_by_txo(tx_hash, index, options))

    def txo_by_txo_ref(self, tx_hash: str, index: int, *, with_cbor: bool | None = None, options: dict | None = None):
        """A single output by reference (GET /transactions/{tx_hash}/outputs/{index}/txo)."""
        return self._send(self.requests.txo_by_txo_ref(tx_hash, index, with_cbor=with_cbor, options=options))

    def txos_by_txo_refs(
        self,
        txo_refs: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        options: dict | None = None,
    ) -> dict:
        """Outputs for a list of `tx_hash#index` references (POST /transactions/outputs)."""
        return self._send(
            self.requests.txos_by_txo_refs(txo_refs, resolve_datums=resolve_datums, with_cbor=with_cbor, options=options)
        )
