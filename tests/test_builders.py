import json

import pytest

from conftest import API_KEY, STAKE_ADDR, TX_HASH
from maestro import MaestroClient, RequiredError
from maestro.accounts import AccountsRequests
from maestro.addresses import AddressesRequests
from maestro.assets import AssetsRequests
from maestro.blocks import BlocksRequests
from maestro.datum import DatumRequests
from maestro.ecosystem import EcosystemRequests
from maestro.enums import Order
from maestro.epochs import EpochsRequests
from maestro.general import GeneralRequests
from maestro.pools import PoolsRequests
from maestro.scripts import ScriptsRequests
from maestro.transaction_manager import TransactionManagerRequests
from maestro.transactions import TransactionsRequests
from maestro.vesting import VestingRequests

POOL_ID = "pool1ynfnjspgckgxjf2zeye8s33jz3e3ndk9pcwp0qzaupzvvd8ukwt"


def test_account_info_request(configuration):
    args = AccountsRequests(configuration).account_info("stake1abc")
    assert args.url == "/accounts/stake1abc"
    assert args.options["method"] == "GET"
    assert args.options["headers"]["api-key"] == API_KEY
    assert "data" not in args.options


def test_account_path_is_percent_encoded(configuration):
    args = AccountsRequests(configuration).account_info("stake 1/abc?")
    assert args.url == "/accounts/stake%201%2Fabc%3F"


def test_account_list_queries(configuration):
    builder = AccountsRequests(configuration)
    assert builder.account_addresses(STAKE_ADDR, count=10).url == f"/accounts/{STAKE_ADDR}/addresses?count=10"
    assert (
        builder.account_assets(STAKE_ADDR, policy="abcd", cursor="c1").url
        == f"/accounts/{STAKE_ADDR}/assets?policy=abcd&cursor=c1"
    )
    assert builder.account_history(STAKE_ADDR, epoch_no=300).url == f"/accounts/{STAKE_ADDR}/history?epoch_no=300"
    assert builder.account_rewards(STAKE_ADDR).url == f"/accounts/{STAKE_ADDR}/rewards"
    assert builder.account_updates(STAKE_ADDR, count=5, cursor=None).url == f"/accounts/{STAKE_ADDR}/updates?count=5"


@pytest.mark.parametrize(
    "build",
    [
        lambda c: AccountsRequests(c).account_info(None),
        lambda c: AccountsRequests(c).account_addresses(None),
        lambda c: AccountsRequests(c).account_assets(None),
        lambda c: AccountsRequests(c).account_history(None),
        lambda c: AccountsRequests(c).account_rewards(None),
        lambda c: AccountsRequests(c).account_updates(None),
        lambda c: AddressesRequests(c).decode_address(None),
        lambda c: AddressesRequests(c).address_balance(None),
        lambda c: AddressesRequests(c).tx_count_by_address(None),
        lambda c: AddressesRequests(c).txs_by_address(None),
        lambda c: AddressesRequests(c).txs_by_payment_cred(None),
        lambda c: AddressesRequests(c).utxo_refs_at_address(None),
        lambda c: AddressesRequests(c).utxos_by_address(None),
        lambda c: AddressesRequests(c).utxos_by_addresses(None),
        lambda c: AddressesRequests(c).utxos_by_payment_cred(None),
        lambda c: AddressesRequests(c).utxos_by_payment_creds(None),
        lambda c: AssetsRequests(c).asset_info(None),
        lambda c: AssetsRequests(c).asset_accounts(None),
        lambda c: AssetsRequests(c).asset_addresses(None),
        lambda c: AssetsRequests(c).asset_txs(None),
        lambda c: AssetsRequests(c).asset_updates(None),
        lambda c: AssetsRequests(c).asset_utxos(None),
        lambda c: AssetsRequests(c).policy_info(None),
        lambda c: AssetsRequests(c).policy_accounts(None),
        lambda c: AssetsRequests(c).policy_addresses(None),
        lambda c: AssetsRequests(c).policy_txs(None),
        lambda c: AssetsRequests(c).policy_utxos(None),
        lambda c: BlocksRequests(c).block_info(None),
        lambda c: DatumRequests(c).lookup_datum(None),
        lambda c: DatumRequests(c).lookup_datums(None),
        lambda c: EcosystemRequests(c).ada_handle_resolve(None),
        lambda c: EpochsRequests(c).epoch_info(None),
        lambda c: PoolsRequests(c).pool_blocks(None),
        lambda c: PoolsRequests(c).pool_delegators(None),
        lambda c: PoolsRequests(c).pool_history(None),
        lambda c: PoolsRequests(c).pool_info(None),
        lambda c: PoolsRequests(c).pool_metadata(None),
        lambda c: PoolsRequests(c).pool_relays(None),
        lambda c: PoolsRequests(c).pool_updates(None),
        lambda c: ScriptsRequests(c).script_by_hash(None),
        lambda c: TransactionManagerRequests(c).tx_manager_state(None),
        lambda c: TransactionManagerRequests(c).tx_manager_submit(None),
        lambda c: TransactionManagerRequests(c).tx_manager_turbo_submit(None),
        lambda c: TransactionsRequests(c).tx_info(None),
        lambda c: TransactionsRequests(c).tx_cbor(None),
        lambda c: TransactionsRequests(c).address_by_txo(None, 0),
        lambda c: TransactionsRequests(c).address_by_txo(TX_HASH, None),
        lambda c: TransactionsRequests(c).txo_by_txo_ref(None, 0),
        lambda c: TransactionsRequests(c).txo_by_txo_ref(TX_HASH, None),
        lambda c: TransactionsRequests(c).txos_by_txo_refs(None),
        lambda c: VestingRequests(c).vesting_collect(None),
        lambda c: VestingRequests(c).vesting_lock(None),
        lambda c: VestingRequests(c).vesting_state(None),
    ],
)
def test_required_parameters(configuration, build):
    with pytest.raises(RequiredError):
        build(configuration)


def test_address_range_queries(configuration):
    builder = AddressesRequests(configuration)
    args = builder.txs_by_address("addr1xyz", count=20, order=Order.DESC, from_=100, to=200, cursor="abc")
    assert args.url == "/addresses/addr1xyz/transactions?count=20&order=desc&from=100&to=200&cursor=abc"
    assert builder.utxo_refs_at_address("addr1xyz", order="asc").url == "/addresses/addr1xyz/utxo_refs?order=asc"
    assert builder.tx_count_by_address("addr1xyz").url == "/addresses/addr1xyz/transactions/count"
    assert builder.address_balance("addr_vkh1abc").url == "/addresses/cred/addr_vkh1abc/balance"
    with pytest.raises(ValueError):
        builder.txs_by_payment_cred("addr_vkh1abc", order="newest")


def test_address_utxos_ask_for_string_amounts(configuration):
    builder = AddressesRequests(configuration)
    args = builder.utxos_by_address("addr1xyz", resolve_datums=True, with_cbor=False)
    assert args.url == "/addresses/addr1xyz/utxos?resolve_datums=true&with_cbor=false"
    assert args.options["headers"]["amounts-as-strings"] == "true"

    args = builder.utxos_by_payment_creds(["addr_vkh1a", "addr_vkh1b"], count=50)
    assert args.url == "/addresses/cred/utxos?count=50"
    assert args.options["method"] == "POST"
    assert args.options["headers"]["Content-Type"] == "application/json"
    assert args.options["headers"]["amounts-as-strings"] == "true"
    assert json.loads(args.options["data"]) == ["addr_vkh1a", "addr_vkh1b"]


def test_utxos_by_addresses_body(configuration):
    args = AddressesRequests(configuration).utxos_by_addresses(["addr1a"], with_cbor=True)
    assert args.url == "/addresses/utxos?with_cbor=true"
    assert args.options["data"] == '["addr1a"]'


def test_asset_and_policy_paths(configuration):
    builder = AssetsRequests(configuration)
    asset = "c6e65ba7878b2f8ea0ad39287d3e2fd256dc5c4160fc19bdf4c4d87e7447454e53"
    assert builder.asset_info(asset).url == f"/assets/{asset}"
    assert builder.asset_accounts(asset, count=1).url == f"/assets/{asset}/accounts?count=1"
    assert builder.asset_addresses(asset).url == f"/assets/{asset}/addresses"
    assert (
        builder.asset_txs(asset, from_height=10, order="desc").url
        == f"/assets/{asset}/transactions?from_height=10&order=desc"
    )
    assert builder.asset_updates(asset, order=Order.ASC).url == f"/assets/{asset}/updates?order=asc"
    assert builder.asset_utxos(asset, from_=1, to=2).url == f"/assets/{asset}/utxos?from=1&to=2"

    policy = "c6e65ba7878b2f8ea0ad39287d3e2fd256dc5c4160fc19bdf4c4d87e"
    assert builder.policy_info(policy).url == f"/assets/policy/{policy}"
    assert builder.policy_accounts(policy, cursor="x").url == f"/assets/policy/{policy}/accounts?cursor=x"
    assert builder.policy_addresses(policy).url == f"/assets/policy/{policy}/addresses"
    assert builder.policy_txs(policy, count=3).url == f"/assets/policy/{policy}/txs?count=3"
    assert builder.policy_utxos(policy, order="desc").url == f"/assets/policy/{policy}/utxos?order=desc"


def test_general_blocks_epochs_paths(configuration):
    general = GeneralRequests(configuration)
    assert general.chain_tip().url == "/chain-tip"
    assert general.era_history().url == "/era-history"
    assert general.protocol_params().url == "/protocol-parameters"
    assert general.system_start().url == "/system-start"

    blocks = BlocksRequests(configuration)
    assert blocks.block_info(9000000).url == "/blocks/9000000"
    assert blocks.block_latest().url == "/blocks/latest"

    epochs = EpochsRequests(configuration)
    assert epochs.current_epoch().url == "/epochs/current"
    assert epochs.epoch_info(0).url == "/epochs/0/info"


def test_datum_ecosystem_scripts(configuration):
    assert DatumRequests(configuration).lookup_datum("ab12").url == "/datums/ab12"
    args = DatumRequests(configuration).lookup_datums(["ab12", "cd34"])
    assert (args.url, args.options["method"]) == ("/datums", "POST")
    assert json.loads(args.options["data"]) == ["ab12", "cd34"]
    assert EcosystemRequests(configuration).ada_handle_resolve("$jane").url == "/ecosystem/adahandle/%24jane"
    assert ScriptsRequests(configuration).script_by_hash("ff00").url == "/scripts/ff00"


def test_pool_requests(configuration):
    builder = PoolsRequests(configuration)
    assert builder.list_pools().url == "/pools"
    assert builder.list_pools(count=100, cursor="next").url == "/pools?count=100&cursor=next"
    assert (
        builder.pool_blocks(POOL_ID, epoch_no=400, order="asc").url
        == f"/pools/{POOL_ID}/blocks?epoch_no=400&order=asc"
    )
    assert builder.pool_delegators(POOL_ID, count=2).url == f"/pools/{POOL_ID}/delegators?count=2"
    assert builder.pool_history(POOL_ID).url == f"/pools/{POOL_ID}/history"
    assert builder.pool_metadata(POOL_ID).url == f"/pools/{POOL_ID}/metadata"
    assert builder.pool_relays(POOL_ID).url == f"/pools/{POOL_ID}/relays"
    assert builder.pool_updates(POOL_ID).url == f"/pools/{POOL_ID}/updates"

    info = builder.pool_info(POOL_ID)
    assert info.url == f"/pools/{POOL_ID}/info"
    assert info.options["headers"]["amounts-as-strings"] == "true"
    assert "amounts-as-strings" not in builder.pool_metadata(POOL_ID).options["headers"]


def test_transaction_requests(configuration):
    builder = TransactionsRequests(configuration)
    assert builder.tx_info(TX_HASH).url == f"/transactions/{TX_HASH}"
    assert builder.tx_cbor(TX_HASH).url == f"/transactions/{TX_HASH}/cbor"
    assert builder.address_by_txo(TX_HASH, 0).url == f"/transactions/{TX_HASH}/outputs/0/address"
    assert builder.txo_by_txo_ref(TX_HASH, 3, with_cbor=True).url == f"/transactions/{TX_HASH}/outputs/3/txo?with_cbor=true"

    args = builder.txos_by_txo_refs([f"{TX_HASH}#0"], resolve_datums=True)
    assert args.url == "/transactions/outputs?resolve_datums=true"
    assert args.options["method"] == "POST"
    assert args.options["headers"]["Content-Type"] == "application/json"
    assert json.loads(args.options["data"]) == [f"{TX_HASH}#0"]


def test_tx_manager_requests(configuration):
    builder = TransactionManagerRequests(configuration)
    assert builder.tx_manager_history().url == "/txmanager/history"
    assert builder.tx_manager_history(count=10, page=2).url == "/txmanager/history?count=10&page=2"
    assert builder.tx_manager_state(TX_HASH).url == f"/txmanager/{TX_HASH}/state"

    hex_tx = "84a30081825820"
    submit = builder.tx_manager_submit(hex_tx)
    assert submit.url == "/txmanager"
    assert submit.options["method"] == "POST"
    assert submit.options["headers"]["Content-Type"] == "application/cbor"
    assert submit.options["data"] == bytes.fromhex(hex_tx)


def test_turbo_submit_body_from_hex_and_bytes(configuration):
    builder = TransactionManagerRequests(configuration)
    hex_tx = "84a400818258201e4f"
    args = builder.tx_manager_turbo_submit(hex_tx)
    assert args.url == "/txmanager/turbosubmit"
    assert args.options["data"] == bytes.fromhex(hex_tx)

    raw = bytes.fromhex(hex_tx)
    assert builder.tx_manager_turbo_submit(raw).options["data"] == raw


def test_vesting_requests(configuration):
    builder = VestingRequests(configuration)
    assert builder.vesting_state("addr1ben").url == "/contracts/vesting/state/addr1ben"

    collect = builder.vesting_collect("addr1ben")
    assert (collect.url, collect.options["method"]) == ("/contracts/vesting/collect/addr1ben", "POST")
    assert "data" not in collect.options

    lock = builder.vesting_lock({"sender": "addr1s", "beneficiary": "addr1ben", "total_installments": 4})
    assert lock.url == "/contracts/vesting/lock"
    assert json.loads(lock.options["data"])["total_installments"] == 4


def test_builders_do_not_mutate_call_options(configuration):
    options = {"headers": {"X-Req": "1"}, "timeout": 3}
    args = AccountsRequests(configuration).account_info(STAKE_ADDR, options)
    assert options == {"headers": {"X-Req": "1"}, "timeout": 3}
    assert args.options["headers"] == {"api-key": API_KEY, "X-Req": "1"}
    assert args.options["timeout"] == 3


def test_facades_expose_their_builders(client: MaestroClient):
    assert isinstance(client.accounts.requests, AccountsRequests)
    assert isinstance(client.tx_manager.requests, TransactionManagerRequests)
    assert client.vesting.requests.configuration is client.configuration


def test_submit_rejects_non_cbor_body(configuration):
    with pytest.raises(TypeError):
        TransactionManagerRequests(configuration).tx_manager_submit(4)
