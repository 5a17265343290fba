"""Shared fixtures: deterministic keys and light keystores."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from eth_account import Account

from gambit7702.config.logging_config import PACKAGE_LOGGER
from gambit7702.helpers.calldata import accept_calldata
from gambit7702.helpers import web3_setup

from .fakes import PASSWORD, PRIVATE_KEY


@pytest.fixture
def account():
    return Account.from_key(PRIVATE_KEY)


@pytest.fixture
def accept_data() -> bytes:
    return accept_calldata()


@pytest.fixture
def keyfile(tmp_path: Path) -> Path:
    """Keystore for PRIVATE_KEY with a minimal pbkdf2 work factor."""
    keystore = Account.encrypt(PRIVATE_KEY, PASSWORD, kdf="pbkdf2", iterations=2)
    path = tmp_path / "key.json"
    path.write_text(json.dumps(keystore), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment and the cached client out of the tests."""
    for name in ("RPC_URL", "RPC_TIMEOUT", "KEYSTORE_PASSWORD", "ALT_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(web3_setup, "_w3_instance", None)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
