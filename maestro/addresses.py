"""
Addresses API module: address decoding, balances, transactions and UTxOs by address or payment credential.
UTxO endpoints ask the server for amounts as strings.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import HEADER_AMOUNTS_AS_STRING, RequestArgs, assert_param_exists, check_order, render_path
from maestro.enums import ContentType, Order


def _range_query(count, order, from_, to, cursor) -> dict:
    return {"count": count, "order": check_order(order), "from": from_, "to": to, "cursor": cursor}


class AddressesRequests(BaseRequests):
    """Request builders for /addresses endpoints."""

    def decode_address(self, address: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("decode_address", "address", address)
        return self.build("GET", render_path("/addresses/{address}/decode", address=address), options=options)

    def address_balance(self, credential: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("address_balance", "credential", credential)
        path = render_path("/addresses/cred/{credential}/balance", credential=credential)
        return self.build("GET", path, options=options)

    def tx_count_by_address(self, address: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("tx_count_by_address", "address", address)
        path = render_path("/addresses/{address}/transactions/count", address=address)
        return self.build("GET", path, options=options)

    def txs_by_address(
        self,
        address: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("txs_by_address", "address", address)
        path = render_path("/addresses/{address}/transactions", address=address)
        return self.build("GET", path, _range_query(count, order, from_, to, cursor), options)

    def txs_by_payment_cred(
        self,
        credential: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("txs_by_payment_cred", "credential", credential)
        path = render_path("/addresses/cred/{credential}/transactions", credential=credential)
        return self.build("GET", path, _range_query(count, order, from_, to, cursor), options)

    def utxo_refs_at_address(
        self,
        address: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("utxo_refs_at_address", "address", address)
        path = render_path("/addresses/{address}/utxo_refs", address=address)
        return self.build("GET", path, _range_query(count, order, from_, to, cursor), options)

    def utxos_by_address(
        self,
        address: str,
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("utxos_by_address", "address", address)
        path = render_path("/addresses/{address}/utxos", address=address)
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, **_range_query(count, order, from_, to, cursor)}
        return self.build("GET", path, query, options, extra_headers=HEADER_AMOUNTS_AS_STRING)

    def utxos_by_addresses(
        self,
        addresses: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("utxos_by_addresses", "addresses", addresses)
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, "count": count, "cursor": cursor}
        return self.build(
            "POST",
            "/addresses/utxos",
            query,
            options,
            content_type=ContentType.JSON.value,
            json_body=addresses,
            extra_headers=HEADER_AMOUNTS_AS_STRING,
        )

    def utxos_by_payment_cred(
        self,
        credential: str,
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("utxos_by_payment_cred", "credential", credential)
        path = render_path("/addresses/cred/{credential}/utxos", credential=credential)
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, **_range_query(count, order, from_, to, cursor)}
        return self.build("GET", path, query, options, extra_headers=HEADER_AMOUNTS_AS_STRING)

    def utxos_by_payment_creds(
        self,
        credentials: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> RequestArgs:
        assert_param_exists("utxos_by_payment_creds", "credentials", credentials)
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, "count": count, "cursor": cursor}
        return self.build(
            "POST",
            "/addresses/cred/utxos",
            query,
            options,
            content_type=ContentType.JSON.value,
            json_body=credentials,
            extra_headers=HEADER_AMOUNTS_AS_STRING,
        )


class AddressesAPI(BaseAPI):
    """Addresses endpoints. Query keyword arguments mirror AddressesRequests."""

    requests_class = AddressesRequests

    def decode_address(self, address: str, options: dict | None = None) -> dict:
        """Decode a bech32/base58 address into its components (GET /addresses/{address}/decode)."""
        return self._send(self.requests.decode_address(address, options))

    def address_balance(self, credential: str, options: dict | None = None) -> dict:
        return self._send(self.requests.address_balance(credential, options))

    def tx_count_by_address(self, address: str, options: dict | None = None) -> dict:
        return self._send(self.requests.tx_count_by_address(address, options))

    def txs_by_address(self, address: str, **query) -> dict:
        return self._send(self.requests.txs_by_address(address, **query))

    def txs_by_payment_cred(self, credential: str, **query) -> dict:
        return self._send(self.requests.txs_by_payment_cred(credential, **query))

    def utxo_refs_at_address(self, address: str, **query) -> dict:
        return self._send(self.requests.utxo_refs_at_address(address, **query))

    def utxos_by_address(self, address: str, **query) -> dict:
        """UTxOs at an address (GET /addresses/{address}/utxos)."""
        return self._send(self.requests.utxos_by_address(address, **query))

    def utxos_by_addresses(self, addresses: list[str], **query) -> dict:
        """UTxOs at several addresses (POST /addresses/utxos)."""
        return self._send(self.requests.utxos_by_addresses(addresses, **query))

    def utxos_by_payment_cred(self, credential: str, **query) -> dict:
        return self._send(self.requests.utxos_by_payment_cred(credential, **query))

    def utxos_by_payment_creds(self, credentials: list[str], **query) -> dict:
        return self._send(self.requests.utxos_by_payment_creds(credentials, **query))
