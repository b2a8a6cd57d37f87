from __future__ import annotations

import logging

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

logger = logging.getLogger(__name__)

ASGI_APP = "config.asgi:application"


class Command(BaseCommand):
    help = "Serve the Socket.IO chat relay (and the HTTP status page) with uvicorn"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--host",
            dest="host",
            help="Interface to bind (defaults to settings.CHAT_HOST)",
        )
        parser.add_argument(
            "--port",
            dest="port",
            type=int,
            help="Port to listen on (defaults to settings.CHAT_PORT)",
        )
        parser.add_argument(
            "--log-level",
            dest="log_level",
            choices=["critical", "error", "warning", "info", "debug", "trace"],
            default="info",
            help="uvicorn log level",
        )

    def handle(self, *args, **options) -> str | None:
        host: str = options.get("host") or settings.CHAT_HOST
        port: int = options.get("port") or settings.CHAT_PORT

        logger.info("Socket.IO server running on http://%s:%s", host, port)
        # A single worker: message history lives in this process only.
        uvicorn.run(
            ASGI_APP,
            host=host,
            port=port,
            log_level=options.get("log_level") or "info",
            log_config=None,
        )
        return None
