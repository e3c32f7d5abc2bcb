"""
API Client module providing centralized access to Maestro API endpoints.
Orchestrates the per-resource sub-APIs over one shared Configuration.
"""
from maestro.accounts import AccountsAPI
from maestro.addresses import AddressesAPI
from maestro.assets import AssetsAPI
from maestro.blocks import BlocksAPI
from maestro.configuration import Configuration
from maestro.datum import DatumAPI
from maestro.ecosystem import EcosystemAPI
from maestro.epochs import EpochsAPI
from maestro.general import GeneralAPI
from maestro.pools import PoolsAPI
from maestro.scripts import ScriptsAPI
from maestro.transaction_manager import TransactionManagerAPI
from maestro.transactions import TransactionsAPI
from maestro.vesting import VestingAPI


class MaestroClient:
    """Root client that centralizes sub-APIs and holds the shared configuration."""

    def __init__(self, configuration: Configuration):
        self.configuration = configuration
        self.http = configuration.http
        self.accounts = AccountsAPI(self)
        self.addresses = AddressesAPI(self)
        self.assets = AssetsAPI(self)
        self.blocks = BlocksAPI(self)
        self.datum = DatumAPI(self)
        self.ecosystem = EcosystemAPI(self)
        self.epochs = EpochsAPI(self)
        self.general = GeneralAPI(self)
        self.pools = PoolsAPI(self)
        self.scripts = ScriptsAPI(self)
        self.transactions = TransactionsAPI(self)
        self.tx_manager = TransactionManagerAPI(self)
        self.vesting = VestingAPI(self)

    @classmethod
    def from_env(cls, **overrides) -> "MaestroClient":
        return cls(Configuration.from_env(**overrides))
