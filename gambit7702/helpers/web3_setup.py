"""
Web3 setup helper - provides the chain client used by the accept command.

Public API
----------
get_web3_instance(rpc_url=None, timeout=None)
    Return a Web3 instance connected to the specified RPC URL.
    Falls back to the RPC_URL environment variable.
get_chain_id(w3)
    Read the chain id, wrapping transport failures in ChainError.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from web3 import Web3

from gambit7702.config.settings import RPC_URL_ENV, get_request_timeout
from gambit7702.errors import ChainError

__all__ = ["get_web3_instance", "get_chain_id", "resolve_rpc_url"]

logger = logging.getLogger(__name__)

# Cached web3 instance
_w3_instance: Optional[Web3] = None


def resolve_rpc_url(rpc_url: str | None) -> str:
    """Return the explicit RPC URL, or RPC_URL from the environment, or ''."""
    if rpc_url:
        return rpc_url
    return os.getenv(RPC_URL_ENV) or ""


def get_web3_instance(rpc_url: str | None = None, timeout: float | None = None) -> Web3:
    """
    Get a Web3 instance connected to the specified RPC URL.

    The HTTP provider connects lazily; transport errors surface on the
    first request.

    Args:
        rpc_url: Optional RPC URL. If not provided, uses the RPC_URL env var.
        timeout: Request timeout in seconds (defaults to RPC_TIMEOUT or 30)

    Returns:
        Web3 instance

    Raises:
        ChainError: If no RPC URL is available or the provider cannot be built
    """
    global _w3_instance

    rpc_url = resolve_rpc_url(rpc_url)
    if not rpc_url:
        raise ChainError(f"No RPC URL available. Pass --rpc or set {RPC_URL_ENV}.")

    # Return cached instance if URL matches
    if _w3_instance is not None and _w3_instance.provider.endpoint_uri == rpc_url:
        return _w3_instance

    try:
        if timeout is None:
            timeout = get_request_timeout()
        provider = Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
    except ValueError as e:
        raise ChainError(f"failed to connect to RPC: {e}") from e

    logger.info(f"Using RPC endpoint {rpc_url} (timeout {timeout}s)")
    _w3_instance = Web3(provider)
    return _w3_instance


def get_chain_id(w3: Web3) -> int:
    try:
        return int(w3.eth.chain_id)
    except Exception as e:
        raise ChainError(f"failed to get chain id: {e}") from e
