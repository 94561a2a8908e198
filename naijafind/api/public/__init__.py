"""
Public API Blueprint - anonymous endpoints for the marketplace site.

- supplier search and details
- categories
- contact form, supplier messages, newsletter

Form endpoints are rate-limited per sender email.
"""

from flask import Blueprint

bp = Blueprint('api_public', __name__)


def register_routes():
    """Registers all public API routes."""
    from . import marketplace, contact

    bp.register_blueprint(marketplace.bp)
    bp.register_blueprint(contact.bp)
