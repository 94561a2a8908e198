"""
Notifications API - the caller's inbox.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import jwt_required, jwt_optional, user_required, current_identity
from naijafind.api.schemas import parse_body, parse_args
from naijafind.api.schemas.notifications import NotificationListQuery, NotificationCreateRequest
from naijafind.services import notification_service, user_service

bp = Blueprint('notifications', __name__, url_prefix='/notifications')


@bp.route('', methods=['GET'])
@jwt_required
@user_required
def list_notifications():
    query = parse_args(NotificationListQuery)
    notifications = notification_service.list_notifications(
        g.current_user, query.limit, query.only_unread
    )
    return jsonify({'notifications': [n.to_dict() for n in notifications]}), 200


@bp.route('/unread-count', methods=['GET'])
@jwt_optional
def unread_count():
    """0 for anonymous callers."""
    identity = current_identity()
    user = user_service.find_user(identity['subject'], identity['email']) if identity else None
    return jsonify({'count': notification_service.unread_count(user)}), 200


@bp.route('', methods=['POST'])
@jwt_required
@user_required
def create_notification():
    data = parse_body(NotificationCreateRequest)
    notification = notification_service.create_notification(
        g.current_user,
        data.user_id or g.current_user.id,
        data.type,
        data.title,
        data.message,
        data.data,
        data.action_url
    )
    return jsonify({'success': True, 'id': notification.id}), 201


@bp.route('/<int:notification_id>/read', methods=['POST'])
@jwt_required
@user_required
def mark_as_read(notification_id):
    notification_service.mark_as_read(g.current_user, notification_id)
    return jsonify({'success': True}), 200


@bp.route('/read-all', methods=['POST'])
@jwt_required
@user_required
def mark_all_as_read():
    count = notification_service.mark_all_as_read(g.current_user)
    return jsonify({'success': True, 'count': count}), 200


@bp.route('/<int:notification_id>', methods=['DELETE'])
@jwt_required
@user_required
def delete_notification(notification_id):
    notification_service.delete_notification(g.current_user, notification_id)
    return jsonify({'success': True}), 200
