from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from .config import AuthSettings, get_config
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)
from utils.log import configure_logging, logger
from utils.security import configure_password_hasher

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0.0",
    "info": {
        "title": "Chirpy API",
        "version": "1.0.0",
        "description": "REST API for users, chirps, sessions and the Polka payment webhook.",
    },
    "basePath": "/",
    "schemes": ["http"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        },
        "ApiKey": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Polka webhook key with the `ApiKey ` prefix."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    The auth gate and session manager are built here from an explicit
    AuthSettings object and exposed through app.extensions.
    """
    from utils.authorization import AuthGate
    from utils.decorators import AUTH_GATE_EXTENSION, SESSIONS_EXTENSION
    from utils.sessions import SessionManager

    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    configure_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))

    storage.reload(app.config["DATABASE_URL"], echo=app.config.get("SQL_ECHO", False))
    configure_password_hasher(app.config["ARGON2_TIME_COST"], app.config["ARGON2_MEMORY_COST"])

    settings = AuthSettings.from_config(app.config)
    app.extensions[AUTH_GATE_EXTENSION] = AuthGate(settings)
    app.extensions[SESSIONS_EXTENSION] = SessionManager(settings, storage)

    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    register_error_handlers(app)

    from .health import bp as health_bp
    from .users import bp as users_bp
    from .auth import bp as auth_bp
    from .chirps import bp as chirps_bp
    from .webhooks import bp as webhooks_bp
    from .admin import bp as admin_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(users_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(chirps_bp, url_prefix="/api")
    app.register_blueprint(webhooks_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/admin")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Chirpy",
            "docs": "/apidocs/",
            "health": "/api/healthz",
        }, 200

    logger.info("Chirpy app created (env=%s, platform=%s)", app.config["APP_ENV"], app.config["PLATFORM"])
    return app
