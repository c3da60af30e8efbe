import logging
import os
import socket

from stroke_dashboard.logging_config import configure_logging
from stroke_dashboard.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("stroke_dashboard.app")

app = create_dash_app()
server = app.server

DEFAULT_PORT = 8050
PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First port in [start_port, start_port + span) nobody is listening on."""
    for port in range(start_port, start_port + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
            if probe.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    requested = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = find_free_port(requested)
    if port != requested:
        logger.warning("Port %d is busy, serving on %d instead", requested, port)

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
