#!/usr/bin/env python3
"""
Command line entry point for the MoneyFusion gateway:
- pay: build a payment from flags and print the gateway response
- status: look up a payment token and print the verification record

Examples:
  fusionpay pay --amount 200 --article sac=100 --article chaussure=100 \\
      --client-name "M. Yaya" --client-number 01010101 \\
      --return-url https://my_call_back_link.com
  fusionpay status 5d58823b084564
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple, Union

from fusionpay.clients.sync_client import FusionPay
from fusionpay.error_handler import ErrorHandler, FusionPayError
from fusionpay.utils.config_loader import load_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _number(text: str) -> Union[int, float]:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc


def _key_value(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def _article(text: str) -> Tuple[str, Union[int, float]]:
    name, value = _key_value(text)
    return name, _number(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fusionpay", description="Initiate and verify MoneyFusion payments.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log request payloads and responses")
    subparsers = parser.add_subparsers(dest="command", required=True)

    pay = subparsers.add_parser("pay", help="Initiate a payment")
    pay.add_argument("--api-url", default=None, help="Payment URL (default: FUSIONPAY_API_URL)")
    pay.add_argument("--amount", type=_number, default=None, help="Total price")
    pay.add_argument("--article", action="append", type=_article, default=[], metavar="NAME=VALUE")
    pay.add_argument("--info", action="append", type=_key_value, default=[], metavar="KEY=VALUE",
                     help="Custom data returned with the payment status")
    pay.add_argument("--client-name", default=None)
    pay.add_argument("--client-number", default=None)
    pay.add_argument("--return-url", default=None)
    pay.add_argument("--webhook-url", default=None)

    status = subparsers.add_parser("status", help="Check a payment by token")
    status.add_argument("token", help="Token returned by 'pay' or appended to the return URL")
    return parser


def _build_payment(client: FusionPay, args: argparse.Namespace) -> FusionPay:
    if args.amount is not None:
        client.total_price(args.amount)
    for name, value in args.article:
        client.add_article(name, value)
    if args.info:
        client.add_info(dict(args.info))
    if args.client_name:
        client.client_name(args.client_name)
    if args.client_number:
        client.client_number(args.client_number)
    if args.return_url:
        client.return_url(args.return_url)
    if args.webhook_url:
        client.webhook_url(args.webhook_url)
    return client


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        if args.command == "pay":
            client = _build_payment(FusionPay(args.api_url, config=config), args)
            result = client.make_payment()
        else:
            result = FusionPay(config=config).check_payment_status(args.token)
    except (FusionPayError, FileNotFoundError) as exc:
        error = ErrorHandler().handle_exception(exc, context={"command": args.command})
        print(json.dumps(error, indent=2, ensure_ascii=False), file=sys.stderr)
        return 1

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
