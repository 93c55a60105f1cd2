from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

RULES_EXTENSION = 'hiscore_rules'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    if not flask_app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise RuntimeError('DATABASE_URL is required')

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(
        flask_app,
        origins=flask_app.config.get('CORS_ORIGINS', '*'),
        methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type', 'Authorization'],
        send_wildcard=True,
    )

    x_for = int(flask_app.config.get('PROXY_FIX_X_FOR', 0))
    if x_for > 0:
        flask_app.wsgi_app = ProxyFix(flask_app.wsgi_app, x_for=x_for)

    # Validation constants and the word list are built once and handed to
    # the validator explicitly from here on
    from hiscore.services.scores.rules import rules_from_config
    flask_app.extensions[RULES_EXTENSION] = rules_from_config(flask_app.config)

    from hiscore.api.scores import scores
    flask_app.register_blueprint(scores)

    _register_error_handlers(flask_app)
    _register_commands(flask_app)

    return flask_app


def _register_error_handlers(flask_app):
    @flask_app.errorhandler(404)
    def not_found(_exc):
        return jsonify({'error': 'Not found'}), 404

    @flask_app.errorhandler(405)
    def method_not_allowed(_exc):
        return jsonify({'error': 'Method not allowed'}), 405

    @flask_app.errorhandler(Exception)
    def internal_error(exc):
        if isinstance(exc, HTTPException):
            return jsonify({'error': exc.description}), exc.code
        flask_app.logger.exception(f"[error] unhandled {type(exc).__name__}: {exc}")
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500


def _register_commands(flask_app):
    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the sessions and hi_scores tables."""
        from hiscore import models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    @click.command('purge-sessions')
    def purge_sessions_command():
        """Deletes play sessions older than SESSION_PURGE_AGE_SEC."""
        from hiscore.services.scores.sessions import purge_stale_sessions
        rules = flask_app.extensions[RULES_EXTENSION]
        with flask_app.app_context():
            removed = purge_stale_sessions(rules.purge_age)
            db.session.commit()
            print(f'Purged {removed} stale session(s).')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(purge_sessions_command)
