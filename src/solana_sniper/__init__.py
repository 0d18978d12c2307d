from .config import AppState, Config, Settings, SwapConfig, current, initialize, is_initialized, load_settings
from .errors import (
    ClientConstructionError,
    ConfigNotInitializedError,
    FatalConfigError,
    InvalidWalletError,
    MissingEnvironmentError,
)
from .models import InvalidTransitionError, LiquidityPool, Status
from .swap import SwapDirection, SwapInType, SwapProtocol

__all__ = [
    "AppState",
    "Config",
    "Settings",
    "SwapConfig",
    "current",
    "initialize",
    "is_initialized",
    "load_settings",
    "ClientConstructionError",
    "ConfigNotInitializedError",
    "FatalConfigError",
    "InvalidWalletError",
    "MissingEnvironmentError",
    "InvalidTransitionError",
    "LiquidityPool",
    "Status",
    "SwapDirection",
    "SwapInType",
    "SwapProtocol",
]
