# Main app code for Flask + SQLAlchemy backend implementation

# Import libraries
import logging
from flask import Flask
from flask_restful import Api
from flask_migrate import Migrate
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, TooManyRequests
# Import from other files
from extensions import db, limiter
from resources import WordListResource, HomeResource, GENERIC_ERROR_MESSAGE
from data_service import SQLAlchemyDataService
from models import TABLES
from seed import seed_words_command
from utils import setup_logging
from config import Config

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Try again later."


class WordsApi(Api):
    # Errors raised on API routes land here, not in app.errorhandler
    def handle_error(self, e):
        if isinstance(e, TooManyRequests):
            return self.make_response({"error": RATE_LIMIT_MESSAGE}, 429)
        if isinstance(e, HTTPException):
            return super().handle_error(e)
        logger.exception("Unhandled error in API resource")
        return self.make_response({"error": GENERIC_ERROR_MESSAGE}, 500)


def register_extensions(app, data_service=None):
    db.init_app(app)
    migrate = Migrate(app, db)
    CORS(app)
    limiter.init_app(app)

    if data_service is None:
        data_service = SQLAlchemyDataService(db, TABLES)
    app.extensions['data_service'] = data_service


def register_resources(app):
    api = WordsApi(app, prefix='/api')
    api.add_resource(WordListResource, '/words')
    api.add_resource(HomeResource, '/')


def register_commands(app):
    app.cli.add_command(seed_words_command)


def create_app(config_class=None, data_service=None):
    app = Flask(__name__)
    if config_class is None:
        config_class = Config
    app.config.from_object(config_class)

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'))

    register_extensions(app, data_service)
    register_resources(app)
    register_commands(app)
    return app



if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=5000)
