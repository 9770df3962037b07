"""DebtCycle application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelDebtRepository,
    SQLModelPaymentRepository,
    SQLModelPreferencesRepository,
)
from .logging_config import setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "debtcycle.blueprints.api"


def create_app(config_name: str | None = None, *, config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application instance.

    ``config`` takes precedence over ``config_name`` when both are given.
    """

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config or _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["DEBTCYCLE_CONFIG"] = config_obj

    setup_logging(config_obj)

    engine, session_factory = bootstrap_database(config_obj)
    app.extensions["debtcycle"] = {
        "engine": engine,
        "session_factory": session_factory,
        "debts": SQLModelDebtRepository(session_factory),
        "payments": SQLModelPaymentRepository(session_factory),
        "preferences": SQLModelPreferencesRepository(session_factory),
    }

    _register_blueprints(app)
    _cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]
