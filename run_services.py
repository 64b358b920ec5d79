"""
Main entry point for the messenger backend.
Starts the selected services (all by default), each on its own port.

Usage:
    python run_services.py
    python run_services.py --services auth users
"""

import argparse
import logging
import sys
import time

from messenger.config.logging_config import setup_logging
from messenger.config.settings import Config
from messenger.services import (
    AuthService,
    MessageService,
    UserService,
    WebSocketService,
)

SERVICES = {
    "auth": AuthService,
    "users": UserService,
    "messages": MessageService,
    "websocket": WebSocketService,
}

logger = logging.getLogger("messenger.run_services")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the messenger backend services")
    parser.add_argument(
        "--services",
        nargs="+",
        choices=sorted(SERVICES),
        default=list(SERVICES),
        help="Services to start (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        help="Log level for messenger and uvicorn loggers",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, Config.LOG_PATH or None)
    logger.info("Starting messenger services in %s mode", Config.ENV)

    services = []
    try:
        for key in args.services:
            service = SERVICES[key]()
            service.start()
            services.append(service)

        for service in services:
            logger.info("%s running on port %d", service.name, service.port)
        logger.info("Press Ctrl+C to stop")

        while any(service.is_running() for service in services):
            time.sleep(0.5)
        logger.error("All services have stopped")
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Failed to run services")
        return 1
    finally:
        for service in reversed(services):
            if service.is_running():
                service.stop()


if __name__ == "__main__":
    sys.exit(main())
