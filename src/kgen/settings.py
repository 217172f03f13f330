"""
kgen.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the join service.
- Reject an unusable validation pattern or listen address before serving.
- Hide the control-plane certificate key from repr/logging.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def split_listen_addr(addr: str) -> tuple[str, int]:
    """
    Split a `[host]:port` listen address.

    An empty host (`:8000`) means all interfaces; IPv6 hosts may be bracketed.
    """

    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"listen address {addr!r} is not [host]:port")
    host = host.strip("[]") or "0.0.0.0"
    port_num = int(port)
    if not 0 < port_num < 65536:
        raise ValueError(f"listen port {port_num} out of range")
    return host, port_num


class Settings(BaseSettings):
    """
    Set once at startup (flags override env, env overrides defaults),
    read-only afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="KGEN_",
        case_sensitive=False,
        frozen=True,
    )

    service_name: str = "kgen"
    log_level: str = "INFO"

    # Client authorization
    use_header: bool = False
    header: str = "X-Forwarding-for"
    match: str = "^.*$"

    addr: str = ":8000"

    # Certificate key appended to control-plane joins (`--cert-key`); empty
    # disables control-plane decoration.
    cert: str = Field(default="", repr=False)

    # Token issuer (kubeadm)
    kubeadm_bin: str = "kubeadm"
    kubeconfig: str | None = None
    kubeadm_config: str | None = None
    dry_run: bool = False

    @field_validator("match")
    @classmethod
    def _compile_match(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid validation pattern {v!r}: {e}") from e
        return v

    @field_validator("addr")
    @classmethod
    def _check_addr(cls, v: str) -> str:
        split_listen_addr(v)
        return v

    @property
    def listen_host(self) -> str:
        return split_listen_addr(self.addr)[0]

    @property
    def listen_port(self) -> int:
        return split_listen_addr(self.addr)[1]


# --- Module Notes -----------------------------------------------------------
# Environment variables: KGEN_USE_HEADER, KGEN_HEADER, KGEN_MATCH, KGEN_ADDR,
# KGEN_CERT (certificate key), KGEN_KUBECONFIG, KGEN_KUBEADM_CONFIG, ...
