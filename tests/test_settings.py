"""
tests.test_settings

Settings: defaults, KGEN_* env fallback and load-time validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kgen.settings import Settings, split_listen_addr

def test_defaults() -> None:
    s = Settings()
    assert s.use_header is False
    assert s.header == "X-Forwarding-for"
    assert s.match == "^.*$"
    assert (s.listen_host, s.listen_port) == ("0.0.0.0", 8000)
    assert s.cert == ""

def test_env_fallback(monkeypatch) -> None:
    monkeypatch.setenv("KGEN_USE_HEADER", "true")
    monkeypatch.setenv("KGEN_HEADER", "X-Real-IP")
    monkeypatch.setenv("KGEN_MATCH", r"\.lab$")
    monkeypatch.setenv("KGEN_ADDR", "127.0.0.1:9000")
    monkeypatch.setenv("KGEN_CERT", "abc123")

    s = Settings()

    assert s.use_header is True
    assert s.header == "X-Real-IP"
    assert s.match == r"\.lab$"
    assert (s.listen_host, s.listen_port) == ("127.0.0.1", 9000)
    assert s.cert == "abc123"

def test_explicit_values_beat_env(monkeypatch) -> None:
    monkeypatch.setenv("KGEN_MATCH", "^env$")
    monkeypatch.setenv("KGEN_CERT", "from-env")

    s = Settings(match="^flag$", cert="from-flag")

    assert s.match == "^flag$"
    assert s.cert == "from-flag"

def test_cert_key_is_not_in_repr() -> None:
    assert "abc123" not in repr(Settings(cert="abc123"))

@pytest.mark.parametrize("pattern", ["(", "[a-", "*.example.com"])
def test_invalid_pattern_is_rejected_at_load(pattern) -> None:
    with pytest.raises(ValidationError):
        Settings(match=pattern)

@pytest.mark.parametrize("addr", ["8000", "localhost", ":http", "0.0.0.0:70000"])
def test_invalid_addr_is_rejected(addr) -> None:
    with pytest.raises(ValidationError):
        Settings(addr=addr)

@pytest.mark.parametrize(
    ("addr", "expected"),
    [
        (":8000", ("0.0.0.0", 8000)),
        ("127.0.0.1:8080", ("127.0.0.1", 8080)),
        ("[::1]:9000", ("::1", 9000)),
        ("[::]:8000", ("::", 8000)),
    ],
)
def test_split_listen_addr(addr, expected) -> None:
    assert split_listen_addr(addr) == expected

def test_settings_are_frozen() -> None:
    s = Settings()
    with pytest.raises(ValidationError):
        s.match = "anything"


# --- Module Notes -----------------------------------------------------------
# KGEN_* variables are cleared for every test by the autouse fixture in conftest.
