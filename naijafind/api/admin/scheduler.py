"""
Admin API - background scheduler status.
"""

from flask import Blueprint, jsonify

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.services.scheduler_service import get_scheduler_status

bp = Blueprint('admin_scheduler', __name__, url_prefix='/scheduler')


@bp.route('/status', methods=['GET'])
@jwt_required
@user_required
@admin_required
def scheduler_status():
    return jsonify(get_scheduler_status()), 200
