"""
V1 API Blueprint - endpoints for signed-in buyers and suppliers.

Every endpoint needs an identity provider JWT.
"""

from flask import Blueprint

bp = Blueprint('api_v1', __name__)


def register_routes():
    """
    Registers the v1 sub-blueprints.
    Called from the app factory.
    """
    from . import users, suppliers, products, orders, reviews, notifications, verification

    bp.register_blueprint(users.bp)
    bp.register_blueprint(suppliers.bp)
    bp.register_blueprint(products.bp)
    bp.register_blueprint(orders.bp)
    bp.register_blueprint(reviews.bp)
    bp.register_blueprint(notifications.bp)
    bp.register_blueprint(verification.bp)
