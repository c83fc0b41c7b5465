import os
import importlib
import pkgutil
from collections.abc import Mapping

from flask import Blueprint, Flask

from config import settings
from services.country_api_client import CountryApiClient
from services.response_renderer import get_data_renderer


def create_app(overrides: Mapping | None = None) -> Flask:
    """Flask application factory."""
    app = Flask(__name__)
    app.secret_key = os.getenv("SECRET_KEY", "dev")

    app.config.update(
        COUNTRY_API_BASE_URL=settings.COUNTRY_API_BASE_URL,
        COUNTRY_API_TIMEOUT=settings.COUNTRY_API_TIMEOUT,
        RESPONSE_RENDER_MODE=settings.RESPONSE_RENDER_MODE,
        VALIDATE_UPDATES=settings.VALIDATE_UPDATES,
    )
    if overrides:
        app.config.update(overrides)

    # Fail at startup, not on the first successful response
    get_data_renderer(app.config["RESPONSE_RENDER_MODE"])

    """Registration of error handlers."""
    from middleware.handlers import register_error_handlers
    register_error_handlers(app)

    # One pooled session per app; tests may hand in their own client
    app.extensions["country_api_client"] = app.config.get("COUNTRY_API_CLIENT") or CountryApiClient(
        app.config["COUNTRY_API_BASE_URL"],
        timeout=app.config["COUNTRY_API_TIMEOUT"],
    )

    # Auto-register all blueprints defined in routes/*.py
    from routes import __path__ as routes_path

    for _, module_name, _ in pkgutil.iter_modules(routes_path):
        module = importlib.import_module(f"routes.{module_name}")
        for attr_name in dir(module):
            obj = getattr(module, attr_name)
            if isinstance(obj, Blueprint):
                app.register_blueprint(obj)

    app.logger.info(
        "Country console ready (api=%s, render=%s)",
        app.config["COUNTRY_API_BASE_URL"],
        app.config["RESPONSE_RENDER_MODE"],
    )
    return app


# at bottom of app.py
if __name__ == "__main__":
    from os import getenv

    app = create_app()
    app.run(
        host="0.0.0.0",
        port=int(getenv("PORT", 5000)),
        debug=getenv("FLASK_DEBUG", "0") == "1",
        use_reloader=False,
    )
