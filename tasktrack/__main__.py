"""Run the tasktrack HTTP server."""

import uvicorn

from tasktrack.core.config import get_settings
from tasktrack.core.logging_setup import configure_logging
from tasktrack.server import create_app


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
