"""
Maestro CLI: query a few common endpoints and print the JSON response.

Reads MAESTRO_API_KEY / MAESTRO_NETWORK from the environment or a local .env file.

Usage examples:
  python -m scripts.maestro_cli chain-tip
  python -m scripts.maestro_cli --network Preprod latest-block
  python -m scripts.maestro_cli account stake1u8...
  python -m scripts.maestro_cli tx 1e4f...c0 --cbor
  python -m scripts.maestro_cli submit signed_tx.hex --turbo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

from maestro import Configuration, MaestroClient, RequiredError


def _print(payload) -> None:
    if isinstance(payload, str):
        print(payload)
    else:
        print(json.dumps(payload, indent=2, sort_keys=True))


def _read_tx(path: str) -> str:
    if path == "-":
        return sys.stdin.read().strip()
    with open(path, encoding="utf-8") as fh:
        return fh.read().strip()


def run(client: MaestroClient, args: argparse.Namespace):
    if args.command == "chain-tip":
        return client.general.chain_tip()
    if args.command == "latest-block":
        return client.blocks.block_latest()
    if args.command == "account":
        return client.accounts.account_info(args.stake_addr)
    if args.command == "tx":
        if args.cbor:
            return client.transactions.tx_cbor(args.tx_hash)
        return client.transactions.tx_info(args.tx_hash)
    if args.command == "submit":
        body = _read_tx(args.file)
        if args.turbo:
            return client.tx_manager.tx_manager_turbo_submit(body)
        return client.tx_manager.tx_manager_submit(body)
    raise ValueError(f"unknown command {args.command!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Query the Maestro blockchain API")
    p.add_argument("--network", help="Mainnet, Preprod or Preview (default: MAESTRO_NETWORK or Mainnet)")
    p.add_argument("--timeout", type=float, default=30.0, help="Per-request timeout in seconds")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each request")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("chain-tip", help="Current chain tip")
    sub.add_parser("latest-block", help="Most recent block")

    acct = sub.add_parser("account", help="Stake account summary")
    acct.add_argument("stake_addr")

    tx = sub.add_parser("tx", help="Transaction details")
    tx.add_argument("tx_hash")
    tx.add_argument("--cbor", action="store_true", help="Fetch the raw CBOR instead")

    submit = sub.add_parser("submit", help="Submit a signed transaction (hex CBOR file, '-' for stdin)")
    submit.add_argument("file")
    submit.add_argument("--turbo", action="store_true", help="Use the turbo submit endpoint")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    overrides: dict = {"base_options": {"timeout": args.timeout}}
    if args.network:
        overrides["network"] = args.network
    try:
        client = MaestroClient(Configuration.from_env(**overrides))
    except ValueError as e:
        logging.error(f"Error: {e}")
        if "MAESTRO_API_KEY" in str(e):
            logging.error("Please set MAESTRO_API_KEY in your .env file or environment.")
        return 2

    try:
        _print(run(client, args))
    except (RequiredError, TypeError, ValueError) as e:
        logging.error(str(e))
        return 2
    except requests.HTTPError as e:
        logging.error(f"{e.response.status_code}: {e.response.text}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
