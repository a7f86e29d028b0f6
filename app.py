import logging
import os
import socket

from cathode_explorer.logging_config import configure_logging
from cathode_explorer.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("cathode_explorer.app")

CONFIG_ROOT = os.getenv("CATHODE_EXPLORER_CONFIG_ROOT", "config")

app = create_dash_app(CONFIG_ROOT)
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port in [start_port, start_port + attempts) nobody listens on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning("Port %s is taken; starting on %s", preferred_port, port)

    debug = os.getenv("DEBUG", "0") == "1"
    logger.info("Starting cathode explorer", extra={"port": port, "config_root": CONFIG_ROOT, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
