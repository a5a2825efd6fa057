from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify

from config import load_settings

from .container import FlexitimeConfig, build_container, config_from_settings
from .core.exceptions import ConfigurationError, DocumentNotFoundError, DomainError, ValidationError
from .days.controller import register as register_days
from .months.controller import register as register_months
from .reports.controller import register as register_reports


def _status_for(e: DomainError) -> int:
    if isinstance(e, DocumentNotFoundError):
        return 404
    if isinstance(e, ValidationError):
        return 400
    if isinstance(e, ConfigurationError):
        return 500
    return 422


def create_app(config: Optional[FlexitimeConfig] = None) -> Flask:
    settings = load_settings()
    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = config or config_from_settings(settings)
    if app.config["DEBUG"]:
        logging.getLogger(__name__).info(
            "[flexitime] settings=%s documents=%s (*%s)", settings.__name__, config.documents_dir, config.document_ext
        )

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        app.logger.warning("%s: %s", type(e).__name__, e)
        return jsonify({"success": False, "message": str(e)}), _status_for(e)

    container = build_container(config=config)
    register_days(app, container)
    register_months(app, container)
    register_reports(app, container)

    return app
