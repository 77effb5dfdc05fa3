import sys

from bookshelf import create_app
from bookshelf.errors import SchemaError
from bookshelf.logger import get_logger


logger = get_logger(__name__)

# create_app migrates the schema before returning, for `flask --app run`
# commands as well as for the server below.
try:
    app = create_app()
except SchemaError as exc:
    logger.critical("Database schema setup failed", error=str(exc))
    sys.exit(1)


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
