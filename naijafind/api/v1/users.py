"""
Users API - sign-up and the current account.

Endpoints:
- POST /users/ensure            create or patch the caller's account
- POST /users/signup/buyer      register as buyer
- POST /users/signup/supplier   register as supplier with a business profile
- GET  /users/me                {user, supplier} or null
"""

from flask import Blueprint, jsonify

from naijafind.api.middleware import jwt_required, jwt_optional, current_identity
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.users import (
    EnsureUserRequest, SignUpBuyerRequest, SignUpSupplierRequest
)
from naijafind.services import user_service

bp = Blueprint('users', __name__, url_prefix='/users')


def _account_payload(user, supplier):
    return {
        'user': user.to_dict() if user else None,
        'supplier': supplier.to_dict() if supplier else None,
    }


@bp.route('/ensure', methods=['POST'])
@jwt_required
def ensure_user():
    data = parse_body(EnsureUserRequest)
    result = user_service.ensure_user(
        current_identity(),
        user_type=data.user_type,
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        email=data.email
    )
    return jsonify(_account_payload(result['user'], result['supplier'])), 200


@bp.route('/signup/buyer', methods=['POST'])
@jwt_required
def sign_up_buyer():
    data = parse_body(SignUpBuyerRequest)
    result = user_service.sign_up_buyer(
        current_identity(),
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone
    )
    return jsonify(result), 200


@bp.route('/signup/supplier', methods=['POST'])
@jwt_required
def sign_up_supplier():
    """
    Creates the supplier profile (approved=false until an admin approves).
    A second call returns the existing profile id with 200.
    """
    data = parse_body(SignUpSupplierRequest)
    result = user_service.sign_up_supplier(current_identity(), data.model_dump())
    return jsonify({'id': result['id']}), 201 if result['created'] else 200


@bp.route('/me', methods=['GET'])
@jwt_optional
def me():
    result = user_service.me(current_identity())
    if result is None:
        return jsonify(None), 200
    return jsonify(_account_payload(result['user'], result['supplier'])), 200
