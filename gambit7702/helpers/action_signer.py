"""
Action signing for AccountSystem7702.

Two conventions are supported:

* EIP-191 (default): the account signs ``keccak256(abi.encode(target, data,
  value, nonce, expiration, feeToken, feeValue, isBasisPoints))`` as an
  "Ethereum Signed Message", matching OpenZeppelin's
  ``ECDSA.recover(MessageHashUtils.toEthSignedMessageHash(hash), sig)``.
* EIP-712: the same fields signed as typed data under an ``Action`` struct,
  with the delegated account as verifying contract.

Signatures are 65 bytes ``r || s || v`` with ``v`` in {27, 28}. eth-account
signs deterministically (RFC 6979), so identical inputs give identical bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from eth_abi import encode
from eth_account import Account
from eth_account.messages import SignableMessage, encode_defunct, encode_typed_data
from eth_utils import keccak
from web3 import Web3

from gambit7702.config.abis import ACTION_COMPONENTS
from gambit7702.config.settings import DEFAULT_DOMAIN_NAME, DEFAULT_DOMAIN_VERSION
from gambit7702.errors import SigningError
from gambit7702.helpers.action import Action

logger = logging.getLogger(__name__)

ACTION_FIELD_TYPES = [component["type"] for component in ACTION_COMPONENTS]


@dataclass(frozen=True)
class SigningDomain:
    """EIP-712 domain of an AccountSystem7702 account."""

    chain_id: int
    verifying_contract: str
    name: str = DEFAULT_DOMAIN_NAME
    version: str = DEFAULT_DOMAIN_VERSION

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": Web3.to_checksum_address(self.verifying_contract),
        }


def action_hash(action: Action) -> bytes:
    """keccak256 of the ABI-encoded action fields."""
    return keccak(encode(ACTION_FIELD_TYPES, list(action.as_abi_tuple())))


def build_typed_data(action: Action, domain: SigningDomain) -> dict[str, Any]:
    """Compose an EIP-712 structured-data dict for an Action."""
    message = {
        component["name"]: value
        for component, value in zip(ACTION_COMPONENTS, action.as_abi_tuple())
    }
    return {
        "types": {
            "EIP712Domain": [
                {"name": "name", "type": "string"},
                {"name": "version", "type": "string"},
                {"name": "chainId", "type": "uint256"},
                {"name": "verifyingContract", "type": "address"},
            ],
            "Action": [{"name": c["name"], "type": c["type"]} for c in ACTION_COMPONENTS],
        },
        "primaryType": "Action",
        "domain": domain.as_dict(),
        "message": message,
    }


def signable_action(action: Action, domain: SigningDomain | None = None) -> SignableMessage:
    """Return the message the account signs; EIP-712 when a domain is given."""
    if domain is None:
        return encode_defunct(primitive=action_hash(action))
    return encode_typed_data(full_message=build_typed_data(action, domain))


def sign_action(action: Action, private_key: Any, domain: SigningDomain | None = None) -> bytes:
    """
    Sign an action with a private key.

    Args:
        action: The action to authorise
        private_key: Private key as bytes, hex string or eth-keys key
        domain: EIP-712 domain; None selects the EIP-191 convention

    Returns:
        65-byte signature

    Raises:
        SigningError: If the message cannot be built or signed
    """
    try:
        signable = signable_action(action, domain)
        signed = Account.sign_message(signable, private_key=private_key)
    except (ValueError, TypeError) as e:
        raise SigningError(f"failed to sign action: {e}") from e

    scheme = "eip712" if domain is not None else "eip191"
    logger.debug(f"Signed action nonce {action.nonce} with {scheme}")
    return bytes(signed.signature)


def recover_action_signer(action: Action, signature: bytes, domain: SigningDomain | None = None) -> str:
    """Recover the checksum address that produced ``signature`` over ``action``."""
    try:
        return Account.recover_message(signable_action(action, domain), signature=signature)
    except (ValueError, TypeError) as e:
        raise SigningError(f"failed to recover signer: {e}") from e
