"""
Epochs API module.
"""
from maestro.base import BaseAPI, BaseRequests
from maestro.common import RequestArgs, assert_param_exists, render_path


class EpochsRequests(BaseRequests):
    def current_epoch(self, options: dict | None = None) -> RequestArgs:
        return self.build("GET", "/epochs/current", options=options)

    def epoch_info(self, epoch_no: int, options: dict | None = None) -> RequestArgs:
        assert_param_exists("epoch_info", "epoch_no", epoch_no)
        return self.build("GET", render_path("/epochs/{epoch_no}/info", epoch_no=epoch_no), options=options)


class EpochsAPI(BaseAPI):
    """Epochs endpoints."""

    requests_class = EpochsRequests

    def current_epoch(self, options: dict | None = None) -> dict:
        """Current epoch summary (GET /epochs/current)."""
        return self._send(self.requests.current_epoch(options))

    def epoch_info(self, epoch_no: int, options: dict | None = None) -> dict:
        """Summary of a specific epoch (GET /epochs/{epoch_no}/info)."""
        return self._send(self.requests.epoch_info(epoch_no, options))
