# This file stores the configs for the Flask app
import os
from dotenv import load_dotenv

load_dotenv()

class Config():
    # Database configs
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'sqlite:///words.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask configs
    DEBUG = False
    PROPAGATE_EXCEPTIONS = False

    # Root logger level, applied once in create_app
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Rate limiting - memory storage keeps the service free of a Redis dependency
    RATELIMIT_STORAGE_URI = 'memory://'
    RATELIMIT_STRATEGY = 'fixed-window'
    RATELIMIT_DEFAULT = os.getenv('RATELIMIT_DEFAULT', '200 per minute')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
    RATELIMIT_ENABLED = False  # Disable rate limiting in tests
