"""
Auth middleware - decorators for authentication and authorization.

Stacking order on a route:

    @jwt_required          token valid        -> g.auth_subject, g.auth_email
    @user_required         local user loaded  -> g.current_user
    @supplier_required     caller has profile -> g.current_supplier
    @admin_required        caller is admin
"""

from functools import wraps
import hmac
from flask import request, g, jsonify, current_app
from .jwt_utils import decode_token, extract_token_from_header, TokenType


def _identity_from_request():
    """(payload, error) for the request's bearer token; (None, None) when absent."""
    token = extract_token_from_header(request.headers.get('Authorization'))
    if not token:
        return None, None

    payload, error = decode_token(token)
    if error:
        return None, error

    if payload.get('type', TokenType.ACCESS) != TokenType.ACCESS:
        return None, 'Access token attendu'

    return payload, None


def _store_identity(payload):
    g.token_payload = payload
    g.auth_subject = payload.get('sub')
    g.auth_email = (payload.get('email') or '').strip().lower() or None


def current_identity():
    """{'subject', 'email'} of the authenticated caller or None."""
    if not getattr(g, 'auth_subject', None):
        return None
    return {'subject': g.auth_subject, 'email': g.auth_email}


def jwt_required(f):
    """
    Requires a valid identity provider token.

    Usage:
        @bp.route('/protected')
        @jwt_required
        def protected_route():
            subject = g.auth_subject
            ...
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        payload, error = _identity_from_request()

        if payload is None:
            return jsonify({
                'error': 'Non autorisé',
                'message': error or 'Token manquant'
            }), 401

        _store_identity(payload)
        return f(*args, **kwargs)

    return decorated


def jwt_optional(f):
    """
    Reads the token when present. Anonymous callers get g.auth_subject = None;
    an invalid token is still rejected.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        payload, error = _identity_from_request()

        if error:
            return jsonify({
                'error': 'Non autorisé',
                'message': error
            }), 401

        if payload:
            _store_identity(payload)
        else:
            g.token_payload = None
            g.auth_subject = None
            g.auth_email = None

        return f(*args, **kwargs)

    return decorated


def user_required(f):
    """
    Loads the local user for the token identity into g.current_user.

    MUST be used AFTER @jwt_required. First-time callers are provisioned
    as plain users.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        if not hasattr(g, 'token_payload'):
            return jsonify({
                'error': 'Internal Error',
                'message': 'user_required must come after jwt_required'
            }), 500

        from ...services import user_service

        user = user_service.find_user(g.auth_subject, g.auth_email)
        if user is None:
            if not g.auth_email:
                return jsonify({
                    'error': 'Non autorisé',
                    'message': 'Le token ne contient pas d\'email'
                }), 401
            user = user_service.ensure_user(current_identity())['user']

        g.current_user = user
        return f(*args, **kwargs)

    return decorated


def supplier_required(f):
    """
    Requires the caller to own a supplier profile; sets g.current_supplier.

    MUST be used AFTER @user_required.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        if not hasattr(g, 'current_user'):
            return jsonify({
                'error': 'Internal Error',
                'message': 'supplier_required must come after user_required'
            }), 500

        from ...services import user_service

        supplier = user_service.get_supplier_for_user(g.current_user)
        if supplier is None:
            return jsonify({
                'error': 'Profil fournisseur non trouvé'
            }), 404

        g.current_supplier = supplier
        return f(*args, **kwargs)

    return decorated


def admin_required(f):
    """
    Requires an admin (is_admin flag or admin role).

    MUST be used AFTER @user_required.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        if not hasattr(g, 'current_user'):
            return jsonify({
                'error': 'Internal Error',
                'message': 'admin_required must come after user_required'
            }), 500

        if not g.current_user.is_platform_admin:
            return jsonify({
                'error': 'Accès refusé',
                'message': 'Seuls les administrateurs peuvent effectuer cette action.'
            }), 403

        return f(*args, **kwargs)

    return decorated


def bootstrap_token_required(f):
    """
    Guards the bootstrap routes with the X-Bootstrap-Token header.

    Open when BOOTSTRAP_TOKEN is empty (production refuses to start
    without one).
    """
    @wraps(f)
    def decorated(*args, **kwargs):

        expected = current_app.config.get('BOOTSTRAP_TOKEN')
        if expected:
            provided = request.headers.get('X-Bootstrap-Token', '')
            if not hmac.compare_digest(provided, expected):
                return jsonify({
                    'success': False,
                    'error': 'Non autorisé'
                }), 401

        return f(*args, **kwargs)

    return decorated


def current_supplier_or_none():
    """Supplier of g.current_user, None when the caller has no profile."""
    from ...services import user_service
    return user_service.get_supplier_for_user(getattr(g, 'current_user', None))
