"""
kgen.issuer.kubeadm

kubeadm-backed token issuer.

Responsibilities:
- Create a bootstrap token and print its join command via
  `kubeadm token create --print-join-command`.
- Resolve the kubeconfig the way kubeadm does when none is configured.
- Report any kubeadm failure as `TokenIssuerError` with kubeadm's own text.
"""

from __future__ import annotations

import asyncio
import os

from kgen.issuer.base import TokenIssuerError
from kgen.observability.logging import get_logger
from kgen.settings import Settings

log = get_logger(__name__)

DEFAULT_KUBECONFIG = "/etc/kubernetes/admin.conf"


def default_kubeconfig_path(explicit: str | None = None) -> str:
    # Same order as kubeadm: explicit path, first KUBECONFIG entry, admin.conf.
    if explicit:
        return explicit
    for path in os.environ.get("KUBECONFIG", "").split(os.pathsep):
        if path:
            return path
    return DEFAULT_KUBECONFIG


class KubeadmTokenIssuer:
    def __init__(
        self,
        *,
        kubeadm_bin: str = "kubeadm",
        kubeconfig: str | None = None,
        config_path: str | None = None,
        dry_run: bool = False,
    ) -> None:
        self._bin = kubeadm_bin
        self._kubeconfig = default_kubeconfig_path(kubeconfig)
        self._config_path = config_path
        self._dry_run = dry_run

    @classmethod
    def from_settings(cls, settings: Settings) -> KubeadmTokenIssuer:
        return cls(
            kubeadm_bin=settings.kubeadm_bin,
            kubeconfig=settings.kubeconfig,
            config_path=settings.kubeadm_config,
            dry_run=settings.dry_run,
        )

    def argv(self) -> list[str]:
        argv = [
            self._bin,
            "token",
            "create",
            "--print-join-command",
            "--kubeconfig",
            self._kubeconfig,
        ]
        if self._config_path:
            argv += ["--config", self._config_path]
        if self._dry_run:
            argv.append("--dry-run")
        return argv

    async def issue_join_command(self) -> bytes:
        argv = self.argv()
        log.info("kubeadm_token_create", kubeconfig=self._kubeconfig, dry_run=self._dry_run)
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TokenIssuerError(f"cannot run {self._bin}: {e}") from e

        out, err = await proc.communicate()
        if proc.returncode != 0:
            detail = err.decode(errors="replace").strip()
            raise TokenIssuerError(detail or f"{self._bin} exited with status {proc.returncode}")
        return out


# --- Module Notes -----------------------------------------------------------
# No timeout is applied to the subprocess; request deadlines belong to the
# serving stack.
