"""
Runtime settings for the accept tooling.

Contains protocol constants, signing domain defaults and the names of the
environment variables read by the CLI.
"""

import os

# =============================================================================
# PROTOCOL CONSTANTS
# =============================================================================

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
UINT256_MAX = 2**256 - 1

# Actions built by the accept command never expire
NO_EXPIRATION = 0

# Basis points denominator used when is_basis_points is set
BASIS_POINTS_DENOMINATOR = 10_000

# =============================================================================
# SIGNING
# =============================================================================

SIGNING_SCHEME_EIP191 = "eip191"
SIGNING_SCHEME_EIP712 = "eip712"
SIGNING_SCHEMES = (SIGNING_SCHEME_EIP191, SIGNING_SCHEME_EIP712)
DEFAULT_SIGNING_SCHEME = SIGNING_SCHEME_EIP191

DEFAULT_DOMAIN_NAME = "AccountSystem7702"
DEFAULT_DOMAIN_VERSION = "1"

# =============================================================================
# ENVIRONMENT
# =============================================================================

PASSWORD_ENV = "KEYSTORE_PASSWORD"
RPC_URL_ENV = "RPC_URL"
RPC_TIMEOUT_ENV = "RPC_TIMEOUT"

# Seconds; passed to the HTTP provider
DEFAULT_REQUEST_TIMEOUT = 30


def get_request_timeout() -> float:
    """Return the RPC request timeout, honouring RPC_TIMEOUT when set."""
    raw = os.getenv(RPC_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{RPC_TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ValueError(f"{RPC_TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout
