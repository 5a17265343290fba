from __future__ import annotations

from pathlib import Path

import pytest

from gambit7702.errors import KeyLoadError
from gambit7702.setup.keystore import load_key, resolve_password

from .fakes import PASSWORD


def test_load_key_decrypts_keystore(keyfile: Path, account) -> None:
    loaded = load_key(keyfile, PASSWORD)

    assert loaded.address == account.address
    assert loaded.key == account.key


def test_load_key_rejects_wrong_password(keyfile: Path) -> None:
    with pytest.raises(KeyLoadError, match="could not decrypt"):
        load_key(keyfile, "wrong")


def test_load_key_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(KeyLoadError, match="not found"):
        load_key(tmp_path / "nope.json", PASSWORD)


def test_load_key_reports_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(KeyLoadError, match="could not read keystore"):
        load_key(path, PASSWORD)


def test_load_key_reports_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(KeyLoadError, match="could not read keystore"):
        load_key(path, PASSWORD)


def test_resolve_password_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KEYSTORE_PASSWORD", "from-default-env")
    monkeypatch.setenv("ALT_PASSWORD", "from-named-env")

    assert resolve_password("from-cli", "ALT_PASSWORD") == "from-cli"
    assert resolve_password("", "ALT_PASSWORD") == "from-named-env"
    assert resolve_password(None, None) == "from-default-env"


def test_resolve_password_allows_empty() -> None:
    assert resolve_password(None) == ""
