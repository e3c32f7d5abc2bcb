"""
General API module: chain tip, era history, protocol parameters and system start.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs


class GeneralRequests(BaseRequests):
    def chain_tip(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/chain-tip", options=options)

    def era_history(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/era-history", options=options)

    def protocol_params(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/protocol-parameters", options=options)

    def system_start(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/system-start", options=options)


class GeneralAPI(BaseAPI):
    """General endpoints."""

    requests_class = GeneralRequests

    def chain_tip(self, options: dict | None = None) -> dict:
        """Current tip of the chain (GET /chain-tip)."""
        return self._send(self.requests.chain_tip(options))

    def era_history(self, options: dict | None = None) -> dict:
        """Era boundaries and slot parameters (GET /era-history)."""
        return self._send(self.requests.era_history(options))

    def protocol_params(self, options: dict | None = None) -> dict:
        """Current protocol parameters (GET /protocol-parameters)."""
        return self._send(self.requests.protocol_params(options))

    def system_start(self, options: dict | None = None) -> dict:
        """Chain genesis timestamp (GET /system-start)."""
        return self._send(self.requests.system_start(options))
