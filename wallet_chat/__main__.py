#!/usr/bin/env python3
"""Command line entry for the wallet chat batch.

Usage:
    python -m wallet_chat --keys pk.txt

Examples:
    # 使用 config.yaml / .env / 环境变量中的配置
    python -m wallet_chat

    # 每个钱包只发 3 条查询，并切换模型
    python -m wallet_chat --keys ./keys.txt --count 3 --model-id emu_otori
"""

import argparse
import sys
from typing import List, Optional

from wallet_chat.batch import BatchConfig, BatchRunner
from wallet_chat.batch.config import MAX_QUERY_COUNT
from wallet_chat.config.settings import settings
from wallet_chat.domain.exceptions import KeyListLoadError
from wallet_chat.infrastructure.logging.logger import logger


def _query_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if not 1 <= count <= MAX_QUERY_COUNT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_QUERY_COUNT}, got {count}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallet_chat",
        description="Sign in with each wallet key, open a chat session and send random queries.",
    )
    parser.add_argument("--keys", default=None, help=f"private key file (default: {settings.keys_file})")
    parser.add_argument("--count", type=_query_count, default=None, help=f"queries per wallet (1..{MAX_QUERY_COUNT})")
    parser.add_argument("--model-id", default=None, help="SLM model id used in chat endpoints")
    parser.add_argument("--base-url", default=None, help="API base URL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = BatchConfig.from_settings(
        settings,
        query_count=args.count,
        model_id=args.model_id,
        base_url=args.base_url,
    )
    keys_file = args.keys or settings.keys_file
    try:
        report = BatchRunner(config).run_from_file(keys_file)
    except KeyListLoadError as e:
        logger.error(f"Error: {e.message}", extra={"extra": e.to_log()})
        return 1
    print(f"Done: {report.succeeded} succeeded, {report.failed} failed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
