import logging

from flask import Flask
from mongoengine import connect, disconnect
from mongoengine.errors import FieldDoesNotExist, NotUniqueError, ValidationError
from werkzeug.exceptions import HTTPException

from .config import Config, apply_mail_settings
from .controllers.admin import bp as admin_bp
from .controllers.bookings import bp as bookings_bp
from .controllers.cars import bp as cars_bp
from .controllers.domains import bp as domains_bp
from .controllers.health import bp as health_bp
from .controllers.locations import bp as locations_bp
from .controllers.paypal import bp as paypal_bp
from .controllers.themes import bp as themes_bp
from .exceptions import CarBookingError
from .extensions import cors, mail
from .utils.decorators import install_admin_gate
from .utils.filters import fmt_iso_local
from .utils.wire import envelope

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _connect_db(app) -> None:
    disconnect()
    kwargs = {"db": app.config["MONGODB_DB"], "host": app.config["MONGODB_URI"], "alias": "default"}
    if app.config.get("MONGO_CLIENT_CLASS") is not None:
        kwargs["mongo_client_class"] = app.config["MONGO_CLIENT_CLASS"]
    connect(**kwargs)


def _register_error_handlers(app) -> None:

    @app.errorhandler(CarBookingError)
    def handle_domain_error(e):
        if e.status_code >= 500:
            logger.error("%s: %s", type(e).__name__, e.message)
        else:
            logger.warning("%s: %s", type(e).__name__, e.message)
        return envelope(message=e.message, status=e.status_code)

    @app.errorhandler(ValidationError)
    @app.errorhandler(FieldDoesNotExist)
    def handle_validation_error(e):
        logger.warning("Validation failed: %s", e)
        return envelope(message=str(e), status=400)

    @app.errorhandler(NotUniqueError)
    def handle_not_unique(e):
        logger.warning("Duplicate key: %s", e)
        return envelope(message="Duplicate value for a unique field", status=400)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return envelope(message=e.description, status=e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception("Unhandled error")
        return envelope(message=str(e) or "Internal server error", status=500)


def create_app(config_overrides=None):
    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    apply_mail_settings(app.config)

    logging.basicConfig(level=str(app.config.get("LOG_LEVEL") or "INFO").upper(), format=LOG_FORMAT)

    _connect_db(app)
    mail.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    install_admin_gate(app)
    app.register_blueprint(cars_bp)
    app.register_blueprint(domains_bp)
    app.register_blueprint(themes_bp)
    app.register_blueprint(bookings_bp)
    app.register_blueprint(paypal_bp)
    app.register_blueprint(locations_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(health_bp)
    _register_error_handlers(app)

    app.json.sort_keys = False
    app.jinja_env.filters["fmt_iso_local"] = fmt_iso_local
    return app
