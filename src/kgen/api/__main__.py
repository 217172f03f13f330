"""
kgen.api.__main__

Entrypoint for running the service via `python -m kgen.api` (or `kgen`).

Responsibilities:
- Parse command-line flags; anything not given falls back to KGEN_* env vars.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

from typing import Any

import click
import uvicorn
from pydantic import ValidationError

from kgen.api.app import create_app
from kgen.settings import Settings


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--useHeader/--no-useHeader",
    "use_header",
    default=None,
    help="Use an HTTP request header to get the client IP. Useful behind a proxy.",
)
@click.option(
    "--header",
    default=None,
    help="Header carrying the client source IP when --useHeader is set. [default: X-Forwarding-for]",
)
@click.option(
    "--match",
    default=None,
    help="Regex a reverse-DNS hostname of the client must match. [default: ^.*$]",
)
@click.option("--addr", default=None, help="[ip]:port used to accept HTTP requests. [default: :8000]")
@click.option(
    "--cert-key",
    "cert",
    default=None,
    help="Certificate key used to add new control-plane nodes.",
)
@click.option("--kubeconfig", default=None, help="kubeconfig used to create join tokens.")
@click.option("--kubeadm-config", "kubeadm_config", default=None, help="kubeadm configuration file.")
@click.option("--log-level", "log_level", default=None, help="Log level. [default: INFO]")
def main(**flags: Any) -> None:
    """Serve kubeadm join commands to clients whose reverse DNS name matches."""
    # Init kwargs take precedence over env in pydantic-settings.
    overrides = {k: v for k, v in flags.items() if v is not None}
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.listen_host,
        port=settings.listen_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# TLS is expected to be terminated in front of this process.
