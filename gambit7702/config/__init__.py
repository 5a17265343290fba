"""
Configuration package for the accept tooling.

Protocol constants, signing defaults, environment variable names and ABIs.
"""

from gambit7702.config.settings import (
    ZERO_ADDRESS,
    UINT256_MAX,
    NO_EXPIRATION,
    BASIS_POINTS_DENOMINATOR,
    SIGNING_SCHEME_EIP191,
    SIGNING_SCHEME_EIP712,
    SIGNING_SCHEMES,
    DEFAULT_SIGNING_SCHEME,
    DEFAULT_DOMAIN_NAME,
    DEFAULT_DOMAIN_VERSION,
    PASSWORD_ENV,
    RPC_URL_ENV,
    RPC_TIMEOUT_ENV,
    DEFAULT_REQUEST_TIMEOUT,
    get_request_timeout,
)

from gambit7702.config.abis import (
    ACCOUNT_SYSTEM_7702_ABI,
    ACTION_COMPONENTS,
    DEGEN_GAMBIT_ABI,
)

__all__ = [
    # Protocol
    'ZERO_ADDRESS',
    'UINT256_MAX',
    'NO_EXPIRATION',
    'BASIS_POINTS_DENOMINATOR',

    # Signing
    'SIGNING_SCHEME_EIP191',
    'SIGNING_SCHEME_EIP712',
    'SIGNING_SCHEMES',
    'DEFAULT_SIGNING_SCHEME',
    'DEFAULT_DOMAIN_NAME',
    'DEFAULT_DOMAIN_VERSION',

    # Environment
    'PASSWORD_ENV',
    'RPC_URL_ENV',
    'RPC_TIMEOUT_ENV',
    'DEFAULT_REQUEST_TIMEOUT',
    'get_request_timeout',

    # ABIs
    'ACCOUNT_SYSTEM_7702_ABI',
    'ACTION_COMPONENTS',
    'DEGEN_GAMBIT_ABI',
]
