# config.py
# Flask application configuration

import os


class Config:
    # Absolute path to the SQLite database in instance/
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "instance", "research_day.db")}',
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Store a category's winners as soon as all of its scores are in
    AUTO_PUBLISH_WINNERS = True


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
