"""structlog configuration."""

import logging

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with level, timestamp and a renderer.

    Debug mode logs everything to a console renderer; otherwise INFO and
    above are rendered as JSON.
    """
    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
    )
