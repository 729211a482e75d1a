"""Process bootstrap: bind the listening socket, announce it, hand it to uvicorn."""

import logging
import socket

import uvicorn

from fixture_app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

APP_PATH = "fixture_app.main:app"


def listening_url(settings: Settings) -> str:
    return f"http://localhost:{settings.port}"


def build_config(settings: Settings) -> uvicorn.Config:
    return uvicorn.Config(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


def bind_listener(config: uvicorn.Config) -> socket.socket:
    """
    Bind and listen on the configured address.

    A failed bind (port in use, permission denied) is logged by uvicorn and
    ends the process with ``SystemExit(1)``, whatever status uvicorn itself
    exits with. There is no retry.
    """
    try:
        sock = config.bind_socket()
    except SystemExit as exc:
        raise SystemExit(1) from exc
    # listen now so a second instance on the same port fails at bind time
    sock.listen(config.backlog)
    logger.debug("Bound listener on %s:%d", config.host, config.port)
    return sock


def serve(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    config = build_config(settings)
    sock = bind_listener(config)

    print(f"Test app listening at {listening_url(settings)}", flush=True)

    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
