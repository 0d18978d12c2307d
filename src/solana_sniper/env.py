"""Typed access to the process environment."""

import logging
import math
import os
import re
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from dotenv import load_dotenv

from .errors import MissingEnvironmentError

LOG = logging.getLogger(__name__)

T = TypeVar("T")

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_UNSIGNED = re.compile(r"\+?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """Populate os.environ from a .env file; already-set variables win."""
    return load_dotenv(dotenv_path=path, override=False)


def required(key: str) -> str:
    value = os.environ.get(key)
    if value is None:
        LOG.error(f"❌ environment variable not present: {key}")
        raise MissingEnvironmentError(key)
    return value


def optional(key: str, default: T, parser: Callable[[str], T]) -> T:
    """Parse ``key`` with ``parser``; absent or unparseable values yield ``default``."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return parser(raw)
    except ValueError:
        return default


def parse_bool(raw: str) -> bool:
    """Exactly ``true`` or ``false``; no case folding, no surrounding whitespace."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_unsigned(raw: str, upper: int) -> int:
    # ASCII digits only; str.isdigit() would also admit other scripts' digits
    if not _UNSIGNED.fullmatch(raw):
        raise ValueError(f"not an unsigned integer: {raw!r}")
    value = int(raw)
    if value > upper:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def parse_u32(raw: str) -> int:
    return _parse_unsigned(raw, U32_MAX)


def parse_u64(raw: str) -> int:
    return _parse_unsigned(raw, U64_MAX)


def parse_float(raw: str) -> float:
    """Plain decimal or exponent notation; nan, inf and ``1_000`` style input are rejected."""
    if not _DECIMAL.fullmatch(raw):
        raise ValueError(f"not a decimal number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {raw!r}")
    return value


def parse_str(raw: str) -> str:
    return raw
