"""
NaijaFind - supplier discovery marketplace for Nigeria.

This module holds the app factory that builds and configures
the Flask application with its extensions and blueprints.
"""

import os
import sys
import click
from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.middleware.proxy_fix import ProxyFix
from .config import get_config, validate_production_config
from .extensions import db, migrate, cors


def create_app(config_class=None):
    """
    App factory - builds and configures the Flask application.

    Args:
        config_class: Optional config class. When omitted the class
                      is picked from the FLASK_ENV variable.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    if config_class is None:
        config_class = get_config()
    app.config.from_object(config_class)

    # Production refuses to start with unsafe settings
    validate_production_config(app)

    # X-Forwarded-* headers behind the platform router
    proxy_count = int(os.environ.get('TRUSTED_PROXY_COUNT', '1'))
    app.wsgi_app = ProxyFix(
        app.wsgi_app,
        x_for=proxy_count,
        x_proto=proxy_count,
        x_host=proxy_count,
        x_prefix=proxy_count
    )

    _init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_cli_commands(app)

    return app


def _init_extensions(app):
    """
    Binds the Flask extensions to the app.
    """
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'])

    # Models must be imported for Flask-Migrate autogenerate
    from . import models  # noqa: F401

    # No scheduler for CLI commands (flask db upgrade, flask shell, ...)
    is_cli_command = 'flask' in sys.argv[0] or any(cmd in sys.argv for cmd in ['db', 'shell', 'routes'])

    # On Heroku only web.1 runs the jobs
    dyno = os.environ.get('DYNO', 'web.1')
    is_primary_dyno = dyno == 'web.1'

    if (not is_cli_command and is_primary_dyno and not app.config.get('TESTING')
            and app.config.get('SCHEDULER_ENABLED', True)):
        from .services.scheduler_service import init_scheduler
        init_scheduler(app)


def _register_blueprints(app):
    """
    Registers the API blueprints.

    Layout:
    - /api/v1/*      authenticated user, supplier and buyer endpoints
    - /api/public/*  anonymous marketplace endpoints
    - /api/admin/*   platform admin endpoints
    - /init, /admin/create, /categories/init  bootstrap endpoints
    """
    from .api.v1 import bp as api_v1_bp, register_routes as register_v1_routes
    register_v1_routes()
    app.register_blueprint(api_v1_bp, url_prefix='/api/v1')

    from .api.public import bp as api_public_bp, register_routes as register_public_routes
    register_public_routes()
    app.register_blueprint(api_public_bp, url_prefix='/api/public')

    from .api.admin import bp as api_admin_bp, register_routes as register_admin_routes
    register_admin_routes()
    app.register_blueprint(api_admin_bp, url_prefix='/api/admin')

    from .api.bootstrap import bp as bootstrap_bp
    app.register_blueprint(bootstrap_bp)

    @app.route('/health')
    def health_check():
        """Health check for the load balancer."""
        return jsonify({
            'status': 'healthy',
            'service': 'naijafind'
        })


def _register_error_handlers(app):
    """
    Registers the global error handlers.
    Every error is returned as JSON.
    """
    from .services.errors import ServiceError, RateLimitError

    @app.errorhandler(ServiceError)
    def service_error(error):
        body = {'error': error.message}
        if isinstance(error, RateLimitError) and error.reset_at:
            body['reset_at'] = error.reset_at.isoformat()
        return jsonify(body), error.code

    @app.errorhandler(ValidationError)
    def validation_error(error):
        return jsonify({
            'error': 'Validation Error',
            'details': error.errors(include_url=False, include_context=False, include_input=False)
        }), 400

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'error': 'Bad Request',
            'message': str(error.description)
        }), 400

    @app.errorhandler(401)
    def unauthorized(error):
        return jsonify({
            'error': 'Unauthorized',
            'message': 'Authentification requise'
        }), 401

    @app.errorhandler(403)
    def forbidden(error):
        return jsonify({
            'error': 'Forbidden',
            'message': 'Accès refusé'
        }), 403

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'Ressource introuvable'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'error': 'Method Not Allowed',
            'message': str(error.description)
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f'Internal Server Error: {error}')
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'Une erreur est survenue sur le serveur'
        }), 500


def _register_cli_commands(app):
    """
    Registers the custom Flask CLI commands.
    Usage: flask <command>
    """
    from .commands.jobs import cleanup_rate_limits_cmd, init_categories_cmd

    app.cli.add_command(cleanup_rate_limits_cmd)
    app.cli.add_command(init_categories_cmd)

    @app.cli.command('create-admin')
    @click.option('--email', prompt='Admin email', help='Login email of the admin')
    @click.option('--first-name', default='', help='First name')
    @click.option('--last-name', default='', help='Last name')
    @click.option('--phone', default='', help='Phone number')
    def create_admin_command(email, first_name, last_name, phone):
        """Creates a platform admin or promotes an existing user."""
        from .services.user_service import create_admin

        result = create_admin(email, first_name or None, last_name or None, phone or None)
        click.echo(result['message'])
