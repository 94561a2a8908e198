"""
Public forms - contact, supplier messages, newsletter.
"""

from flask import Blueprint, jsonify

from naijafind.api.schemas import parse_body
from naijafind.api.schemas.contact import (
    ContactFormRequest, SupplierMessageRequest,
    NewsletterSubscribeRequest, NewsletterUnsubscribeRequest
)
from naijafind.services import contact_service

bp = Blueprint('public_contact', __name__)


@bp.route('/contact', methods=['POST'])
def submit_contact():
    data = parse_body(ContactFormRequest)
    result = contact_service.submit_contact_form(
        data.name, data.email, data.subject, data.message,
        contact_type=data.type, honeypot=data.website
    )
    return jsonify(result), 201


@bp.route('/suppliers/<int:supplier_id>/messages', methods=['POST'])
def send_supplier_message(supplier_id):
    data = parse_body(SupplierMessageRequest)
    result = contact_service.send_supplier_message(
        supplier_id,
        data.sender_name,
        data.sender_email,
        data.subject,
        data.message,
        sender_phone=data.sender_phone
    )
    return jsonify(result), 201


@bp.route('/newsletter/subscribe', methods=['POST'])
def subscribe():
    data = parse_body(NewsletterSubscribeRequest)
    return jsonify(contact_service.subscribe(data.email, data.name, data.sector)), 200


@bp.route('/newsletter/unsubscribe', methods=['POST'])
def unsubscribe():
    data = parse_body(NewsletterUnsubscribeRequest)
    result = contact_service.unsubscribe(data.email)
    return jsonify(result), 200 if result['success'] else 404
