"""Module entrypoint for the mock accrual service.

Starts uvicorn on ACCRUAL_HOST:ACCRUAL_PORT (default 0.0.0.0:3000). The
listening socket is held for the life of the process; bind failures such as
"address already in use" are not handled and end the process.
"""

from __future__ import annotations

import logging

import uvicorn

from .settings import configure_logging, load_settings


log = logging.getLogger("accrual_mock")


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    log.info(
        "accrual mock listening on %s:%d (delay %d ms)",
        settings.host,
        settings.port,
        settings.delay_ms,
    )

    uvicorn.run(
        "accrual_mock.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
