from enum import Enum


class SwapDirection(Enum):
    BUY = "buy"
    SELL = "sell"


class SwapInType(Enum):
    QTY = "qty"  # amount_in is a quantity of SOL
    PCT = "pct"  # amount_in is a fraction of the held balance


class SwapProtocol(Enum):
    AUTO = "auto"
    PUMP_FUN = "pump_fun"
    PUMP_SWAP = "pump_swap"
    RAYDIUM_LAUNCHPAD = "raydium_launchpad"

    @classmethod
    def default(cls) -> "SwapProtocol":
        return cls.AUTO
