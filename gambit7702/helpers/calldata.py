"""
Calldata packing for AccountSystem7702 and DegenGambit.

Function selectors and argument types are taken from the ABI definitions in
gambit7702.config.abis, so the packed bytes follow the contracts' declared
interfaces rather than hand-written signatures.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Sequence

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_abi.exceptions import EncodingError as AbiEncodingError
from eth_utils.abi import collapse_if_tuple, function_abi_to_4byte_selector

from gambit7702.config.abis import ACCOUNT_SYSTEM_7702_ABI, DEGEN_GAMBIT_ABI
from gambit7702.errors import EncodingError
from gambit7702.helpers.action import Action

__all__ = [
    "get_function_abi",
    "function_selector",
    "encode_function_call",
    "accept_calldata",
    "execute_calldata",
    "decode_execute_calldata",
]

logger = logging.getLogger(__name__)


def get_function_abi(abi: Iterable[dict[str, Any]], name: str) -> dict[str, Any]:
    """Return the ABI entry of the function called ``name``."""
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == name:
            return entry
    raise EncodingError(f"function {name!r} not found in ABI")


def _input_types(fn_abi: dict[str, Any]) -> list[str]:
    return [collapse_if_tuple(param) for param in fn_abi.get("inputs", [])]


def function_selector(abi: Iterable[dict[str, Any]], name: str) -> bytes:
    return function_abi_to_4byte_selector(get_function_abi(abi, name))


def encode_function_call(abi: Iterable[dict[str, Any]], name: str, args: Sequence[Any] = ()) -> bytes:
    """
    ABI-encode a call to ``name`` with ``args``.

    Raises:
        EncodingError: If the function is unknown or the arguments do not match its inputs
    """
    fn_abi = get_function_abi(abi, name)
    types = _input_types(fn_abi)
    if len(types) != len(args):
        raise EncodingError(f"{name} expects {len(types)} arguments, got {len(args)}")

    try:
        encoded_params = encode(types, list(args))
    except (AbiEncodingError, TypeError, ValueError, OverflowError) as e:
        raise EncodingError(f"failed to pack input for {name}: {e}") from e

    return function_abi_to_4byte_selector(fn_abi) + encoded_params


@lru_cache(maxsize=None)
def accept_calldata() -> bytes:
    """Calldata for DegenGambit.accept(); constant for a given ABI."""
    return encode_function_call(DEGEN_GAMBIT_ABI, "accept")


def execute_calldata(actions: Sequence[Action], signatures: Sequence[bytes]) -> bytes:
    """
    Build the calldata for AccountSystem7702.execute(Action[],bytes[]).

    Args:
        actions: Actions to execute, in order
        signatures: One signature per action

    Returns:
        Encoded calldata including the function selector
    """
    if len(actions) != len(signatures):
        raise EncodingError(
            f"execute needs one signature per action: {len(actions)} actions, {len(signatures)} signatures"
        )

    calldata = encode_function_call(
        ACCOUNT_SYSTEM_7702_ABI,
        "execute",
        [
            [action.as_abi_tuple() for action in actions],
            [bytes(signature) for signature in signatures],
        ],
    )
    logger.debug(f"Packed execute calldata for {len(actions)} action(s), {len(calldata)} bytes")
    return calldata


def decode_execute_calldata(calldata: bytes | str) -> tuple[list[Action], list[bytes]]:
    """
    Decode execute(Action[],bytes[]) calldata back into actions and signatures.

    Raises:
        EncodingError: If the selector is not execute's or the payload is malformed
    """
    if isinstance(calldata, str):
        try:
            calldata = bytes.fromhex(calldata.replace("0x", ""))
        except ValueError as e:
            raise EncodingError(f"calldata is not valid hex: {e}") from e

    fn_abi = get_function_abi(ACCOUNT_SYSTEM_7702_ABI, "execute")
    selector = function_abi_to_4byte_selector(fn_abi)
    if calldata[:4] != selector:
        raise EncodingError(f"calldata selector 0x{calldata[:4].hex()} is not execute (0x{selector.hex()})")

    try:
        raw_actions, raw_signatures = decode(_input_types(fn_abi), calldata[4:])
    except (AbiDecodingError, ValueError) as e:
        raise EncodingError(f"failed to unpack execute calldata: {e}") from e

    actions = [Action.from_abi_tuple(values) for values in raw_actions]
    signatures = [bytes(signature) for signature in raw_signatures]
    return actions, signatures
