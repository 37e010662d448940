"""ASGI entrypoint: ``uvicorn nutrihive.api.asgi:app``."""

from nutrihive.api.app import create_app
from nutrihive.app_logging import configure_logging
from nutrihive.config import Settings
from nutrihive.containers import build_container

settings = Settings()
configure_logging(settings.log_level)
app = create_app(build_container(settings))
