from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy(session_options={"expire_on_commit": False})


def create_app(config_object=None, overrides=None, book_service=None, page_service=None):
    app = Flask(__name__)

    from bookshelf.config import DevelopmentConfig

    app.config.from_object(config_object or DevelopmentConfig)
    if overrides:
        app.config.update(overrides)

    from bookshelf.logger import get_logger, setup_logging

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FORMAT"])
    logger = get_logger(__name__)

    db.init_app(app)

    import bookshelf.models  # noqa: F401
    from bookshelf.schema import ensure_schema

    # SchemaError propagates: the app must not serve on a half-migrated store.
    with app.app_context():
        ensure_schema()

    from bookshelf.services.book_service import BookService
    from bookshelf.services.page_service import PageService

    app.extensions["book_service"] = book_service or BookService()
    app.extensions["page_service"] = page_service or PageService()

    from bookshelf.blueprints.books import books_bp
    from bookshelf.blueprints.pages import pages_bp
    from bookshelf.blueprints.parsing import IdSegmentConverter
    from bookshelf.errors import register_error_handlers

    app.url_map.converters["id_segment"] = IdSegmentConverter
    app.register_blueprint(books_bp)
    app.register_blueprint(pages_bp)
    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.info(
            "Request handled",
            method=request.method,
            path=request.path,
            status=response.status_code,
        )
        return response

    logger.info("Application created", database=app.config["SQLALCHEMY_DATABASE_URI"])
    return app
