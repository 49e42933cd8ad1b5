"""
tenant_gateway.api.__main__

Entrypoint for running the gateway via `python -m tenant_gateway.api`.

Responsibilities:
- Load settings and exit before serving if any required value is missing.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import sys

import uvicorn
from pydantic import ValidationError

from tenant_gateway.api.app import create_app
from tenant_gateway.observability.logging import configure_logging, get_logger
from tenant_gateway.settings import load_settings

log = get_logger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ValidationError as e:
        configure_logging(service_name="tenant-gateway", level="INFO")
        log.critical(
            "missing_configuration",
            fields=[".".join(str(p) for p in err["loc"]) for err in e.errors()],
            hint="set TURNKEY_PARENT_ORG_ID, TURNKEY_API_URL, TURNKEY_API_PUBLIC_KEY, "
            "TURNKEY_API_PRIVATE_KEY",
        )
        sys.exit(1)

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
