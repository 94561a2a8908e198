"""
Admin API Blueprint - moderation endpoints.

Every endpoint requires a user with admin rights
(is_admin flag or admin role).
"""

from flask import Blueprint

bp = Blueprint('api_admin', __name__)


def register_routes():
    """
    Registers the admin sub-blueprints.
    Called from the app factory.
    """
    from . import suppliers, categories, catalog, verification, notifications, newsletter, scheduler

    bp.register_blueprint(suppliers.bp)
    bp.register_blueprint(categories.bp)
    bp.register_blueprint(catalog.bp)
    bp.register_blueprint(verification.bp)
    bp.register_blueprint(notifications.bp)
    bp.register_blueprint(newsletter.bp)
    bp.register_blueprint(scheduler.bp)
