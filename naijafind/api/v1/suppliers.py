"""
Supplier self-service API - profile, dashboard and inbox.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import jwt_required, user_required, supplier_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.users import SupplierProfileUpdateRequest
from naijafind.services import supplier_service, dashboard_service, contact_service

bp = Blueprint('supplier_self', __name__, url_prefix='/supplier')


@bp.route('/profile', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def get_profile():
    return jsonify({'supplier': g.current_supplier.to_dict()}), 200


@bp.route('/profile', methods=['PUT'])
@jwt_required
@user_required
@supplier_required
def update_profile():
    data = parse_body(SupplierProfileUpdateRequest)
    supplier = supplier_service.update_supplier_profile(
        g.current_supplier, data.model_dump()
    )
    return jsonify({'success': True, 'supplier': supplier.to_dict()}), 200


@bp.route('/dashboard', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def dashboard():
    return jsonify(dashboard_service.supplier_dashboard(g.current_supplier)), 200


@bp.route('/messages', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def list_messages():
    messages = contact_service.list_supplier_messages(g.current_supplier)
    return jsonify({'messages': [m.to_dict() for m in messages]}), 200
