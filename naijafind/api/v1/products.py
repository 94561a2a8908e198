"""
Products API - the caller's supplier catalogue.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import (
    jwt_required, user_required, supplier_required, current_supplier_or_none
)
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.catalog import ProductCreateRequest, ProductUpdateRequest
from naijafind.services import product_service

bp = Blueprint('products', __name__, url_prefix='/products')


@bp.route('', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def list_products():
    products = product_service.list_products(g.current_supplier)
    return jsonify({'products': [p.to_dict() for p in products]}), 200


@bp.route('', methods=['POST'])
@jwt_required
@user_required
@supplier_required
def create_product():
    data = parse_body(ProductCreateRequest)
    product = product_service.create_product(
        g.current_supplier, data.name, data.price, data.stock, data.status
    )
    return jsonify({'success': True, 'id': product.id, 'product': product.to_dict()}), 201


@bp.route('/<int:product_id>', methods=['PUT'])
@jwt_required
@user_required
def update_product(product_id):
    data = parse_body(ProductUpdateRequest)
    product = product_service.update_product(
        current_supplier_or_none(), product_id, data.model_dump(exclude_unset=True)
    )
    return jsonify({'success': True, 'product': product.to_dict()}), 200


@bp.route('/<int:product_id>', methods=['DELETE'])
@jwt_required
@user_required
def delete_product(product_id):
    product_service.delete_product(current_supplier_or_none(), product_id)
    return jsonify({'success': True}), 200
