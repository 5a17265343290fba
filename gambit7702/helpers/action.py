"""
Action model for AccountSystem7702
==================================

An Action is the record an AccountSystem7702 account signs to authorise a
single delegated call. This module holds the immutable Action type, the
on-chain nonce lookup and the builder used by the accept command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from web3 import Web3

from gambit7702.config.abis import ACCOUNT_SYSTEM_7702_ABI
from gambit7702.config.settings import (
    BASIS_POINTS_DENOMINATOR,
    NO_EXPIRATION,
    UINT256_MAX,
    ZERO_ADDRESS,
)
from gambit7702.errors import ChainError

logger = logging.getLogger(__name__)

# ABI tuple type of a single Action, fields in struct order
ACTION_ABI_TYPE = "(address,bytes,uint256,uint256,uint256,address,uint256,bool)"


@dataclass(frozen=True)
class Action:
    """A single call the account system executes on the signer's behalf."""

    target: str
    data: bytes
    value: int
    nonce: int
    expiration: int = NO_EXPIRATION
    fee_token: str = ZERO_ADDRESS
    fee_value: int = 0
    is_basis_points: bool = False

    def __post_init__(self):
        object.__setattr__(self, "target", Web3.to_checksum_address(self.target))
        object.__setattr__(self, "fee_token", Web3.to_checksum_address(self.fee_token))
        object.__setattr__(self, "data", bytes(self.data))
        for name in ("value", "nonce", "expiration", "fee_value"):
            amount = getattr(self, name)
            if isinstance(amount, bool) or not isinstance(amount, int):
                raise TypeError(f"{name} must be an int, got {type(amount).__name__}")
            if not 0 <= amount <= UINT256_MAX:
                raise ValueError(f"{name} does not fit in uint256: {amount}")

    def as_abi_tuple(self) -> tuple[Any, ...]:
        """Return the fields in AccountSystem7702.Action struct order."""
        return (
            self.target,
            self.data,
            self.value,
            self.nonce,
            self.expiration,
            self.fee_token,
            self.fee_value,
            self.is_basis_points,
        )

    @classmethod
    def from_abi_tuple(cls, values: tuple[Any, ...] | list[Any]) -> "Action":
        target, data, value, nonce, expiration, fee_token, fee_value, is_basis_points = values
        return cls(
            target=target,
            data=bytes(data),
            value=int(value),
            nonce=int(nonce),
            expiration=int(expiration),
            fee_token=fee_token,
            fee_value=int(fee_value),
            is_basis_points=bool(is_basis_points),
        )

    @property
    def fee_amount(self) -> int:
        """Fee in token units; basis-point fees are taken from value."""
        if self.is_basis_points:
            return self.value * self.fee_value // BASIS_POINTS_DENOMINATOR
        return self.fee_value

    def __str__(self) -> str:
        return (
            "{"
            f"Target:{self.target} "
            f"Data:0x{self.data.hex()} "
            f"Value:{self.value} "
            f"Nonce:{self.nonce} "
            f"Expiration:{self.expiration} "
            f"FeeToken:{self.fee_token} "
            f"FeeValue:{self.fee_value} "
            f"IsBasisPoints:{str(self.is_basis_points).lower()}"
            "}"
        )


def get_action_nonce(w3: Web3, account_address: str) -> int:
    """Read the current action nonce of a delegated account."""
    account_system = w3.eth.contract(
        address=Web3.to_checksum_address(account_address),
        abi=ACCOUNT_SYSTEM_7702_ABI,
    )
    try:
        return int(account_system.functions.nonce().call())
    except Exception as e:
        raise ChainError(f"failed to get nonce: {e}") from e


def resolve_action_nonce(w3: Web3, account_address: str, action_nonce: int | None = None) -> int:
    """
    Return the nonce for the next action.

    An explicit nonce is used as-is. Otherwise the on-chain counter is read
    and incremented. The read is not atomic with submission: two runs in quick
    succession can compute the same nonce, and the contract rejects the stale one.
    """
    if action_nonce is not None:
        return action_nonce

    current = get_action_nonce(w3, account_address)
    logger.info(f"On-chain action nonce for {account_address} is {current}, using {current + 1}")
    return current + 1


def build_accept_action(
    target: str,
    accept_data: bytes,
    nonce: int,
    value: int = 0,
    fee_token: str = ZERO_ADDRESS,
    fee_value: int = 0,
    is_basis_points: bool = False,
) -> Action:
    """
    Assemble the Action that calls accept() on the game contract.

    Args:
        target: DegenGambit contract address
        accept_data: Calldata for accept()
        nonce: Action nonce
        value: Native currency to forward (in wei)
        fee_token: Token the relay fee is paid in (zero address for native)
        fee_value: Fee amount, or basis points of value when is_basis_points
        is_basis_points: Interpret fee_value as parts-per-10000 of value
    """
    return Action(
        target=target,
        data=accept_data,
        value=value,
        nonce=nonce,
        expiration=NO_EXPIRATION,
        fee_token=fee_token,
        fee_value=fee_value,
        is_basis_points=is_basis_points,
    )
