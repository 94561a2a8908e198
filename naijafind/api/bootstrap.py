"""
Bootstrap routes - first-time setup of a fresh deployment.

- GET|POST /init              seed the default categories
- POST     /admin/create      create or promote an admin
- POST     /categories/init   seed a custom category list

No user authentication: guarded by BOOTSTRAP_TOKEN
(X-Bootstrap-Token header) when it is configured.
"""

from flask import Blueprint, jsonify

from naijafind.api.middleware import bootstrap_token_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.catalog import CategoriesInitRequest
from naijafind.api.schemas.users import CreateAdminRequest
from naijafind.services import category_service, user_service

bp = Blueprint('bootstrap', __name__)


@bp.route('/init', methods=['GET', 'POST'])
@bootstrap_token_required
def init_categories():
    return jsonify(category_service.seed_categories()), 200


@bp.route('/admin/create', methods=['POST'])
@bootstrap_token_required
def create_admin():
    data = parse_body(CreateAdminRequest)
    result = user_service.create_admin(
        data.email, data.first_name, data.last_name, data.phone
    )
    return jsonify(result), 200


@bp.route('/categories/init', methods=['POST'])
@bootstrap_token_required
def init_custom_categories():
    data = parse_body(CategoriesInitRequest)
    result = category_service.seed_categories(
        [c.model_dump() for c in data.categories]
    )
    return jsonify(result), 200
