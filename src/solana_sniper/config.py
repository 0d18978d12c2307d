"""Process-wide runtime configuration.

``initialize()`` builds the single :class:`Config` for the process: it parses
the environment, constructs the RPC clients, loads the operator wallet and
logs a startup summary. ``current()`` hands out exclusive access to it::

    config = await initialize()
    ...
    async with current() as config:
        slippage = config.swap_config.slippage

Every failure while building raises a :class:`FatalConfigError` subclass and
nothing is published, so ``current()`` keeps refusing access.
"""

import asyncio
import logging
import math
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional

from solana.rpc.api import Client
from solana.rpc.async_api import AsyncClient
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from . import env
from .clients import create_nonblocking_rpc_client, create_nozomi_nonblocking_rpc_client, create_rpc_client
from .constants import INIT_MSG, LAMPORTS_PER_SOL
from .errors import ConfigNotInitializedError
from .price import fetch_sol_price
from .swap import SwapDirection, SwapInType, SwapProtocol
from .wallet import import_wallet

LOG = logging.getLogger(__name__)

DEFAULT_TARGET_TOKEN_MINT = "CGrptxv4hSiNSCTufJzBMzarfrfjNhD9vMmhYQ8eVPsA"
DEFAULT_SLIPPAGE = 10_000
MAX_SLIPPAGE = 25_000
MAX_BUY_AMOUNT_CAP = 0.1


@dataclass(frozen=True)
class SwapConfig:
    mint: str
    swap_direction: SwapDirection
    in_type: SwapInType
    amount_in: float
    slippage: int
    max_buy_amount: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "slippage", min(self.slippage, MAX_SLIPPAGE))
        # min() hands back NaN when it is the first argument
        cap = MAX_BUY_AMOUNT_CAP if math.isnan(self.amount_in) else min(self.amount_in, MAX_BUY_AMOUNT_CAP)
        object.__setattr__(self, "max_buy_amount", cap)


@dataclass(frozen=True)
class AppState:
    rpc_client: Client
    rpc_nonblocking_client: AsyncClient
    nozomi_rpc_client: AsyncClient
    wallet: Keypair
    protocol_preference: SwapProtocol = field(default_factory=SwapProtocol.default)


@dataclass(frozen=True)
class Settings:
    """Values read straight from the environment, before any I/O."""

    yellowstone_grpc_http: str
    yellowstone_grpc_token: str
    target_token_mint: str
    slippage_input: int
    counter_limit: int
    min_buy_amount: float
    max_buy_amount: float
    is_progressive_sell: bool
    min_sol: float
    minimal_balance_for_fee: float
    minimal_wsol_balance_for_trading: float
    min_sell_delay_hours: int
    max_sell_delay_hours: int
    price_change_threshold: float
    min_buy_ratio: float
    max_buy_ratio: float
    volume_wave_active_hours: int
    volume_wave_slow_hours: int
    guardian_mode_enabled: bool
    guardian_drop_threshold: float
    token_amount: float


def load_settings() -> Settings:
    return Settings(
        yellowstone_grpc_http=env.required("YELLOWSTONE_GRPC_HTTP"),
        yellowstone_grpc_token=env.required("YELLOWSTONE_GRPC_TOKEN"),
        target_token_mint=env.optional("TARGET_TOKEN_MINT", DEFAULT_TARGET_TOKEN_MINT, env.parse_str),
        slippage_input=env.optional("SLIPPAGE", DEFAULT_SLIPPAGE, env.parse_u64),
        counter_limit=env.optional("COUNTER_LIMIT", 0, env.parse_u32),
        min_buy_amount=env.optional("MIN_BUY_AMOUNT", 0.2, env.parse_float),
        max_buy_amount=env.optional("MAX_BUY_AMOUNT", 0.005, env.parse_float),
        is_progressive_sell=env.optional("IS_PROGRESSIVE_SELL", False, env.parse_bool),
        min_sol=env.optional("MIN_SOL", 0.005, env.parse_float),
        minimal_balance_for_fee=env.optional("MINIMAL_BALANCE_FOR_FEE", 0.01, env.parse_float),
        minimal_wsol_balance_for_trading=env.optional("MINIMAL_WSOL_BALANCE_FOR_TRADING", 0.001, env.parse_float),
        min_sell_delay_hours=env.optional("MIN_SELL_DELAY_HOURS", 24, env.parse_u64),
        max_sell_delay_hours=env.optional("MAX_SELL_DELAY_HOURS", 72, env.parse_u64),
        price_change_threshold=env.optional("PRICE_CHANGE_THRESHOLD", 0.15, env.parse_float),
        min_buy_ratio=env.optional("MIN_BUY_RATIO", 0.67, env.parse_float),
        max_buy_ratio=env.optional("MAX_BUY_RATIO", 0.73, env.parse_float),
        volume_wave_active_hours=env.optional("VOLUME_WAVE_ACTIVE_HOURS", 2, env.parse_u64),
        volume_wave_slow_hours=env.optional("VOLUME_WAVE_SLOW_HOURS", 6, env.parse_u64),
        guardian_mode_enabled=env.optional("GUARDIAN_MODE_ENABLED", True, env.parse_bool),
        guardian_drop_threshold=env.optional("GUARDIAN_DROP_THRESHOLD", 0.10, env.parse_float),
        token_amount=env.optional("TOKEN_AMOUNT", 0.001, env.parse_float),
    )


@dataclass
class Config:
    yellowstone_grpc_http: str
    yellowstone_grpc_token: str
    app_state: AppState
    swap_config: SwapConfig
    counter_limit: int
    is_progressive_sell: bool
    target_token_mint: str
    min_buy_amount: float
    max_buy_amount: float
    min_sol: float
    minimal_balance_for_fee: float
    minimal_wsol_balance_for_trading: float
    min_sell_delay_hours: int
    max_sell_delay_hours: int
    price_change_threshold: float
    min_buy_ratio: float
    max_buy_ratio: float
    volume_wave_active_hours: int
    volume_wave_slow_hours: int
    guardian_mode_enabled: bool
    guardian_drop_threshold: float

    @classmethod
    def from_settings(cls, settings: Settings, app_state: AppState) -> "Config":
        swap_config = SwapConfig(
            mint=settings.target_token_mint,
            swap_direction=SwapDirection.BUY,
            in_type=SwapInType.QTY,
            amount_in=settings.token_amount,
            slippage=settings.slippage_input,
        )
        return cls(
            yellowstone_grpc_http=settings.yellowstone_grpc_http,
            yellowstone_grpc_token=settings.yellowstone_grpc_token,
            app_state=app_state,
            swap_config=swap_config,
            counter_limit=settings.counter_limit,
            is_progressive_sell=settings.is_progressive_sell,
            target_token_mint=settings.target_token_mint,
            min_buy_amount=settings.min_buy_amount,
            max_buy_amount=settings.max_buy_amount,
            min_sol=settings.min_sol,
            minimal_balance_for_fee=settings.minimal_balance_for_fee,
            minimal_wsol_balance_for_trading=settings.minimal_wsol_balance_for_trading,
            min_sell_delay_hours=settings.min_sell_delay_hours,
            max_sell_delay_hours=settings.max_sell_delay_hours,
            price_change_threshold=settings.price_change_threshold,
            min_buy_ratio=settings.min_buy_ratio,
            max_buy_ratio=settings.max_buy_ratio,
            volume_wave_active_hours=settings.volume_wave_active_hours,
            volume_wave_slow_hours=settings.volume_wave_slow_hours,
            guardian_mode_enabled=settings.guardian_mode_enabled,
            guardian_drop_threshold=settings.guardian_drop_threshold,
        )


async def query_balance(client: AsyncClient, pubkey: Pubkey) -> int:
    try:
        return (await client.get_balance(pubkey)).value
    except Exception as e:
        LOG.error(f"Failed to get wallet balance: {e}")
        return 0


async def _build() -> Config:
    LOG.info(INIT_MSG)
    settings = load_settings()

    rpc_client = create_rpc_client()
    opened: List[AsyncClient] = []
    try:
        rpc_nonblocking_client = create_nonblocking_rpc_client()
        opened.append(rpc_nonblocking_client)
        nozomi_rpc_client = create_nozomi_nonblocking_rpc_client()
        opened.append(nozomi_rpc_client)
        wallet = import_wallet()
    except Exception:
        # a failed build may be retried; don't leave httpx sessions behind
        for client in opened:
            await client.close()
        raise

    sol_price = await asyncio.to_thread(fetch_sol_price)
    balance = await query_balance(rpc_nonblocking_client, wallet.pubkey())

    app_state = AppState(
        rpc_client=rpc_client,
        rpc_nonblocking_client=rpc_nonblocking_client,
        nozomi_rpc_client=nozomi_rpc_client,
        wallet=wallet,
    )
    config = Config.from_settings(settings, app_state)
    LOG.info(
        "[INIT] => [SNIPER ENVIRONMENT]:\n"
        f"\t[Yellowstone gRpc]: {config.yellowstone_grpc_http}\n"
        f"\t[Wallet]: {wallet.pubkey()}, [Balance]: {balance / LAMPORTS_PER_SOL} Sol\n"
        f"\t[Slippage]: {settings.slippage_input}, [Solana]: {sol_price}, [Amount]: {settings.token_amount}\n"
        f"\t[Target Token]: {config.target_token_mint}"
    )
    return config


_config: Optional[Config] = None
_lock: Optional[asyncio.Lock] = None
_init_task: Optional["asyncio.Task[Config]"] = None


async def _initialize_once() -> Config:
    global _config, _lock, _init_task
    try:
        config = await _build()
    except BaseException:
        _init_task = None
        raise
    _lock = asyncio.Lock()
    _config = config
    LOG.info("✅ Config initialized")
    return config


async def initialize() -> Config:
    """Build the process Config on first call; every caller gets the same instance."""
    global _init_task
    if _config is not None:
        return _config
    if _init_task is None:
        _init_task = asyncio.ensure_future(_initialize_once())
    return await asyncio.shield(_init_task)


def is_initialized() -> bool:
    return _config is not None


@asynccontextmanager
async def current() -> AsyncIterator[Config]:
    """Exclusive access to the Config; raises ConfigNotInitializedError before initialize()."""
    if _config is None or _lock is None:
        raise ConfigNotInitializedError()
    async with _lock:
        yield _config


def _reset() -> None:
    """Forget the published Config. Only the test suite calls this."""
    global _config, _lock, _init_task
    _config = None
    _lock = None
    _init_task = None
