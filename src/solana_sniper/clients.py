"""RPC client handles used by the trading engine.

All three handles read at ``processed`` commitment and are built with
``timeout=None``: an unresponsive endpoint stalls the caller instead of
raising after solana-py's default 10 s.
"""

from urllib.parse import urlparse

from solana.rpc.api import Client
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Processed

from . import env
from .errors import ClientConstructionError

RPC_TIMEOUT = None


def validate_endpoint(endpoint: str) -> str:
    parsed = urlparse(endpoint.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClientConstructionError(f"malformed RPC endpoint: {endpoint!r}")
    return endpoint.strip()


def create_rpc_client() -> Client:
    rpc_http = validate_endpoint(env.required("RPC_HTTP"))
    return Client(rpc_http, commitment=Processed, timeout=RPC_TIMEOUT)


def create_nonblocking_rpc_client() -> AsyncClient:
    rpc_http = validate_endpoint(env.required("RPC_HTTP"))
    return AsyncClient(rpc_http, commitment=Processed, timeout=RPC_TIMEOUT)


def create_nozomi_nonblocking_rpc_client() -> AsyncClient:
    nozomi_url = validate_endpoint(env.required("NOZOMI_URL"))
    return AsyncClient(nozomi_url, commitment=Processed, timeout=RPC_TIMEOUT)
