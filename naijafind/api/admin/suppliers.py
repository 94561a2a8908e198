"""
Admin API - supplier moderation.

Endpoints:
- GET    /suppliers                 all suppliers (?approved=true|false)
- POST   /suppliers/<id>/approve    approve, notify and email the owner
- POST   /suppliers/<id>/reject     reject with an optional reason
- POST   /suppliers/<id>/feature    {"featured": bool}
- POST   /suppliers/<id>/verify     {"verified": bool}
- DELETE /suppliers/<id>
"""

from typing import Optional
from flask import Blueprint, jsonify, request
from pydantic import BaseModel, Field

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_body
from naijafind.services import supplier_service

bp = Blueprint('admin_suppliers', __name__, url_prefix='/suppliers')


class RejectRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=1000)


class FeatureRequest(BaseModel):
    featured: bool = True


class VerifyRequest(BaseModel):
    verified: bool = True


@bp.route('', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_suppliers():
    approved_arg = request.args.get('approved')
    approved = None
    if approved_arg is not None:
        approved = approved_arg.lower() == 'true'
    suppliers = supplier_service.list_all_suppliers(approved)
    return jsonify({'suppliers': [s.to_dict() for s in suppliers]}), 200


@bp.route('/<int:supplier_id>/approve', methods=['POST'])
@jwt_required
@user_required
@admin_required
def approve_supplier(supplier_id):
    supplier = supplier_service.set_approval(supplier_id, True)
    return jsonify({'success': True, 'supplier': supplier.to_dict()}), 200


@bp.route('/<int:supplier_id>/reject', methods=['POST'])
@jwt_required
@user_required
@admin_required
def reject_supplier(supplier_id):
    data = parse_body(RejectRequest)
    supplier = supplier_service.set_approval(supplier_id, False, data.reason)
    return jsonify({'success': True, 'supplier': supplier.to_dict()}), 200


@bp.route('/<int:supplier_id>/feature', methods=['POST'])
@jwt_required
@user_required
@admin_required
def feature_supplier(supplier_id):
    data = parse_body(FeatureRequest)
    supplier = supplier_service.set_featured(supplier_id, data.featured)
    return jsonify({'success': True, 'supplier': supplier.to_dict()}), 200


@bp.route('/<int:supplier_id>/verify', methods=['POST'])
@jwt_required
@user_required
@admin_required
def verify_supplier(supplier_id):
    data = parse_body(VerifyRequest)
    supplier = supplier_service.set_verified(supplier_id, data.verified)
    return jsonify({'success': True, 'supplier': supplier.to_dict()}), 200


@bp.route('/<int:supplier_id>', methods=['DELETE'])
@jwt_required
@user_required
@admin_required
def delete_supplier(supplier_id):
    supplier_service.delete_supplier(supplier_id)
    return jsonify({'success': True}), 200
