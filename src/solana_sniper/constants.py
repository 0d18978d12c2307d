"""Log-instruction identifiers and program ids watched by the stream consumers."""

from typing import Dict, Tuple

from .swap import SwapDirection, SwapProtocol

INIT_MSG = r"""
  ____        _                   ____        _
 / ___|  ___ | | __ _ _ __   __ _/ ___| _ __ (_)_ __   ___ _ __
 \___ \ / _ \| |/ _` | '_ \ / _` \___ \| '_ \| | '_ \ / _ \ '__|
  ___) | (_) | | (_| | | | | (_| |___) | | | | | |_) |  __/ |
 |____/ \___/|_|\__,_|_| |_|\__,_|____/|_| |_|_| .__/ \___|_|
                                               |_|
"""

LAMPORTS_PER_SOL = 1_000_000_000

# pump.fun
LOG_INSTRUCTION = "initialize2"
PUMP_LOG_INSTRUCTION = "MintTo"
PUMP_FUN_BUY_LOG_INSTRUCTION = "Buy"
PUMP_FUN_PROGRAM_DATA_PREFIX = "Program data: G3KpTd7rY3Y"
PUMP_FUN_SELL_LOG_INSTRUCTION = "Sell"
PUMP_FUN_BUY_OR_SELL_PROGRAM_DATA_PREFIX = "Program data: vdt/007mYe"

# pump.swap
PUMP_SWAP_LOG_INSTRUCTION = "Migerate"
PUMP_SWAP_BUY_LOG_INSTRUCTION = "Buy"
PUMP_SWAP_BUY_PROGRAM_DATA_PREFIX = "PProgram data: Z/RSHyz1d3"
PUMP_SWAP_SELL_LOG_INSTRUCTION = "Sell"
PUMP_SWAP_SELL_PROGRAM_DATA_PREFIX = "Program data: Pi83CqUD3Cp"

# raydium launchpad
RAYDIUM_LAUNCHPAD_LOG_INSTRUCTION = "MintTo"
RAYDIUM_LAUNCHPAD_PROGRAM_DATA_PREFIX = "Program data: G3KpTd7rY3Y"
RAYDIUM_LAUNCHPAD_BUY_LOG_INSTRUCTION = "Buy"
RAYDIUM_LAUNCHPAD_BUY_OR_SELL_PROGRAM_DATA_PREFIX = "Program data: vdt/007mYe"
RAYDIUM_LAUNCHPAD_SELL_LOG_INSTRUCTION = "Sell"

JUPITER_PROGRAM = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
OKX_DEX_PROGRAM = "6m2CDdhRgxpH4WjvdzxAYbGxwdGUz5MziiL5jek2kBma"

# (log instruction, program data prefix)
TradeMarker = Tuple[str, str]

_TRADE_MARKERS: Dict[SwapProtocol, Dict[SwapDirection, TradeMarker]] = {
    SwapProtocol.PUMP_FUN: {
        SwapDirection.BUY: (PUMP_FUN_BUY_LOG_INSTRUCTION, PUMP_FUN_BUY_OR_SELL_PROGRAM_DATA_PREFIX),
        SwapDirection.SELL: (PUMP_FUN_SELL_LOG_INSTRUCTION, PUMP_FUN_BUY_OR_SELL_PROGRAM_DATA_PREFIX),
    },
    SwapProtocol.PUMP_SWAP: {
        SwapDirection.BUY: (PUMP_SWAP_BUY_LOG_INSTRUCTION, PUMP_SWAP_BUY_PROGRAM_DATA_PREFIX),
        SwapDirection.SELL: (PUMP_SWAP_SELL_LOG_INSTRUCTION, PUMP_SWAP_SELL_PROGRAM_DATA_PREFIX),
    },
    SwapProtocol.RAYDIUM_LAUNCHPAD: {
        SwapDirection.BUY: (RAYDIUM_LAUNCHPAD_BUY_LOG_INSTRUCTION, RAYDIUM_LAUNCHPAD_BUY_OR_SELL_PROGRAM_DATA_PREFIX),
        SwapDirection.SELL: (RAYDIUM_LAUNCHPAD_SELL_LOG_INSTRUCTION, RAYDIUM_LAUNCHPAD_BUY_OR_SELL_PROGRAM_DATA_PREFIX),
    },
}


def trade_markers(protocol: SwapProtocol, direction: SwapDirection) -> Tuple[TradeMarker, ...]:
    """Markers a stream consumer should match for ``protocol`` trades in ``direction``."""
    if protocol is SwapProtocol.AUTO:
        return tuple(table[direction] for table in _TRADE_MARKERS.values())
    if protocol in _TRADE_MARKERS:
        return (_TRADE_MARKERS[protocol][direction],)
    raise ValueError(f"unknown swap protocol: {protocol}")
