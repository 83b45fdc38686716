# app.py
# Flask application built with the application factory pattern

import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import db, migrate

# Models must be imported here so that Flask-Migrate can see them
from models import Presenter, Score, AwardWinner, Feedback


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    os.makedirs(app.instance_path, exist_ok=True)

    # --- Extensions ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Blueprints ---
    from routes.main import main_bp
    from routes.admin import admin_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)

    # --- CLI ---
    from seed_data import seed_command
    app.cli.add_command(seed_command)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    return app
