from flask import jsonify
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound


class SchemaError(Exception):
    """The database schema could not be created or migrated."""


class StoreError(Exception):
    """A query against the book store failed."""


def register_error_handlers(app):
    @app.errorhandler(BadRequest)
    def bad_request(exc):
        return jsonify({"error": exc.description}), 400

    @app.errorhandler(NotFound)
    def not_found(exc):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(exc):
        response = jsonify({"error": "method_not_allowed"})
        response.status_code = 405
        if exc.valid_methods:
            response.headers["Allow"] = ", ".join(exc.valid_methods)
        return response

    @app.errorhandler(StoreError)
    def store_error(exc):
        # Driver text is returned as-is.
        return jsonify({"error": str(exc)}), 500
