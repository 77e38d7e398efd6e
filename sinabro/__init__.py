from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy.orm import DeclarativeBase


from config import Config
from .common.errors import handle_exception


class Base(DeclarativeBase):
    pass
db = SQLAlchemy(model_class=Base)
migrate = Migrate()



def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (console + file)
    from .common.logging_config import setup_logging
    setup_logging(app)

    CORS(app, resources={r"/*": {
        "origins": app.config.get("CORS_ORIGINS", "*"),
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": "*",
        "expose_headers": "*"
    }})

    db.init_app(app)
    migrate.init_app(app, db)

    # Models must be imported before create_all / migrations see the metadata
    from . import model  # noqa: F401

    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()
            app.logger.info("Database tables created/verified")

    # Build repositories and services once, then hand them to the controllers
    from .config.di_setup import setup_dependencies
    dependencies = setup_dependencies()
    app.extensions["sinabro"] = dependencies

    from .controller.places import init_app as places_api_init
    places_api = places_api_init(dependencies.places_service)
    app.register_blueprint(places_api)

    # Register health check endpoint
    from .controller.health import init_app as health_api_init
    health_api = health_api_init()
    app.register_blueprint(health_api)

    app.register_error_handler(Exception, handle_exception)

    return app
