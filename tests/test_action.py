from __future__ import annotations

from types import SimpleNamespace

import pytest
from web3 import Web3

from gambit7702.config.settings import UINT256_MAX, ZERO_ADDRESS
from gambit7702.errors import ChainError
from gambit7702.helpers.action import (
    Action,
    build_accept_action,
    get_action_nonce,
    resolve_action_nonce,
)

from .fakes import FEE_TOKEN, GAMBIT_ADDRESS, FailingEth, fake_web3

ACCOUNT = "0x3333333333333333333333333333333333333333"


def test_build_accept_action_fills_fixed_fields(accept_data: bytes) -> None:
    action = build_accept_action(
        target=GAMBIT_ADDRESS,
        accept_data=accept_data,
        nonce=7,
        value=1000,
        fee_token=FEE_TOKEN,
        fee_value=250,
        is_basis_points=True,
    )

    assert action.target == Web3.to_checksum_address(GAMBIT_ADDRESS)
    assert action.data == accept_data
    assert action.expiration == 0
    assert action.nonce == 7
    assert action.fee_token == Web3.to_checksum_address(FEE_TOKEN)
    assert action.is_basis_points is True


def test_action_defaults_to_native_fee_and_no_expiration(accept_data: bytes) -> None:
    action = Action(target=GAMBIT_ADDRESS, data=accept_data, value=0, nonce=1)

    assert action.fee_token == ZERO_ADDRESS
    assert action.fee_value == 0
    assert action.expiration == 0
    assert action.is_basis_points is False


def test_action_is_immutable(accept_data: bytes) -> None:
    action = Action(target=GAMBIT_ADDRESS, data=accept_data, value=0, nonce=1)

    with pytest.raises(AttributeError):
        action.nonce = 2  # type: ignore[misc]


@pytest.mark.parametrize("field", ["value", "nonce", "fee_value"])
def test_action_rejects_out_of_range_integers(field: str, accept_data: bytes) -> None:
    kwargs = {"target": GAMBIT_ADDRESS, "data": accept_data, "value": 0, "nonce": 0}
    kwargs[field] = UINT256_MAX + 1
    with pytest.raises(ValueError):
        Action(**kwargs)

    kwargs[field] = -1
    with pytest.raises(ValueError):
        Action(**kwargs)


def test_abi_tuple_roundtrip_preserves_fields(accept_data: bytes) -> None:
    action = Action(
        target=GAMBIT_ADDRESS,
        data=accept_data,
        value=5,
        nonce=9,
        fee_token=FEE_TOKEN.lower(),
        fee_value=3,
        is_basis_points=True,
    )

    assert Action.from_abi_tuple(action.as_abi_tuple()) == action


def test_fee_amount_in_basis_points(accept_data: bytes) -> None:
    bps = Action(target=GAMBIT_ADDRESS, data=accept_data, value=1000, nonce=1, fee_value=250, is_basis_points=True)
    absolute = Action(target=GAMBIT_ADDRESS, data=accept_data, value=1000, nonce=1, fee_value=250)

    assert bps.fee_amount == 25
    assert absolute.fee_amount == 250


def test_action_str_lists_every_field(accept_data: bytes) -> None:
    action = Action(target=GAMBIT_ADDRESS, data=accept_data, value=1, nonce=2)
    rendered = str(action)

    for label in ("Target:", "Data:0x", "Value:1", "Nonce:2", "Expiration:0", "FeeToken:", "FeeValue:0", "IsBasisPoints:false"):
        assert label in rendered


def test_resolve_action_nonce_increments_remote_counter() -> None:
    w3 = fake_web3(nonce=5)

    assert resolve_action_nonce(w3, ACCOUNT) == 6
    address, _abi = w3.eth.contract_calls[0]
    assert address == Web3.to_checksum_address(ACCOUNT)


def test_resolve_action_nonce_prefers_explicit_value() -> None:
    w3 = fake_web3(nonce=5)

    assert resolve_action_nonce(w3, ACCOUNT, 42) == 42
    assert w3.eth.contract_calls == []


def test_explicit_zero_nonce_is_not_treated_as_missing() -> None:
    w3 = fake_web3(nonce=5)

    assert resolve_action_nonce(w3, ACCOUNT, 0) == 0


def test_get_action_nonce_wraps_transport_errors() -> None:
    w3 = SimpleNamespace(eth=FailingEth())

    with pytest.raises(ChainError, match="failed to get nonce"):
        get_action_nonce(w3, ACCOUNT)
