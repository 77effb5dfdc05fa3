from flask import Blueprint


pages_bp = Blueprint("pages", __name__, url_prefix="/api/pages")

from bookshelf.blueprints.pages import routes  # noqa: E402,F401
