"""
Admin API - newsletter subscribers and campaigns.
"""

from flask import Blueprint, jsonify, request

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.contact import NewsletterSendRequest
from naijafind.services import contact_service

bp = Blueprint('admin_newsletter', __name__, url_prefix='/newsletter')


@bp.route('/subscribers', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_subscribers():
    """?status=active|unsubscribed|all"""
    subscribers = contact_service.list_subscribers(request.args.get('status'))
    return jsonify({'subscribers': [s.to_dict() for s in subscribers]}), 200


@bp.route('/send', methods=['POST'])
@jwt_required
@user_required
@admin_required
def send_newsletter():
    data = parse_body(NewsletterSendRequest)
    return jsonify(contact_service.send_newsletter(data.subject, data.html)), 200
