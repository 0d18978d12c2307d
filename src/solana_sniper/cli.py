import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import initialize
from .env import load_env_file
from .errors import FatalConfigError
from .logging_utils import new_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Initialize the Solana sniper runtime configuration")
    parser.add_argument("--env-file", type=Path, default=None, help="Optional .env file to load before reading the environment")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional path to also write logs to")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = new_logger(log_file=str(args.log_file) if args.log_file else None, level=getattr(logging, args.log_level))
    load_env_file(args.env_file)

    try:
        asyncio.run(initialize())
    except FatalConfigError as e:
        log.error(f"❌ Startup aborted: {e}")
        return 1
    log.info("🚀 Configuration ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
