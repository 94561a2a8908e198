"""
API middleware - authentication decorators and JWT helpers.
"""

from .auth import (
    jwt_required, jwt_optional, user_required, supplier_required,
    admin_required, bootstrap_token_required, current_identity,
    current_supplier_or_none
)
from .jwt_utils import create_access_token, decode_token, extract_token_from_header

__all__ = [
    'jwt_required',
    'jwt_optional',
    'user_required',
    'supplier_required',
    'admin_required',
    'bootstrap_token_required',
    'current_identity',
    'current_supplier_or_none',
    'create_access_token',
    'decode_token',
    'extract_token_from_header',
]
