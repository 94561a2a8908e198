"""
Admin API - notifications to users.
"""

from flask import Blueprint, jsonify

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.notifications import AdminNotificationRequest, BulkNotificationRequest
from naijafind.services import notification_service

bp = Blueprint('admin_notifications', __name__, url_prefix='/notifications')


@bp.route('', methods=['POST'])
@jwt_required
@user_required
@admin_required
def send_notification():
    data = parse_body(AdminNotificationRequest)
    notification = notification_service.send_admin_notification(
        data.user_id, data.title, data.message, data.type, data.action_url
    )
    return jsonify({'success': True, 'id': notification.id}), 201


@bp.route('/bulk', methods=['POST'])
@jwt_required
@user_required
@admin_required
def send_bulk():
    data = parse_body(BulkNotificationRequest)
    count = notification_service.send_bulk_notification(
        data.user_ids, data.title, data.message, data.type
    )
    return jsonify({'success': True, 'count': count}), 201
