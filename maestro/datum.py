"""
Datum API module for looking up Plutus datums by hash.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path
from maestro.enums import ContentType


class DatumRequests(BaseRequests):
    def lookup_datum(self, datum_hash: str, options: dict | None = None) -> RequestArgs:
        assert_param_exists("lookup_datum", "datum_hash", datum_hash)
        return self.build("GET", render_path("/datums/{datum_hash}", datum_hash=datum_hash), options=options)

    def lookup_datums(self, datum_hashes: list[str], options: dict | None = None) -> RequestArgs:
        assert_param_exists("lookup_datums", "datum_hashes", datum_hashes)
        return self.build(
            "POST", "/datums", options=options, content_type=ContentType.JSON.value, json_body=datum_hashes
        )


class DatumAPI(BaseAPI):
    """Datum endpoints."""

    requests_class = DatumRequests

    def lookup_datum(self, datum_hash: str, options: dict | None = None) -> dict:
        """Datum bytes and JSON for a datum hash (GET /datums/{datum_hash})."""
        return self._send(self.requests.lookup_datum(datum_hash, options))

    def lookup_datums(self, datum_hashes: list[str], options: dict | None = None) -> dict:
        """Batch datum lookup (POST /datums)."""
        return self._send(self.requests.lookup_datums(datum_hashes, options))
