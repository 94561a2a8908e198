"""
Admin API - verification document review.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.verification import DocumentReviewRequest
from naijafind.services import verification_service

bp = Blueprint('admin_verification', __name__, url_prefix='/verification')


@bp.route('/pending', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_pending():
    return jsonify({'documents': verification_service.list_pending_documents()}), 200


@bp.route('/documents/<int:document_id>/review', methods=['POST'])
@jwt_required
@user_required
@admin_required
def review_document(document_id):
    data = parse_body(DocumentReviewRequest)
    result = verification_service.review_document(
        g.current_user, document_id, data.status, data.rejection_reason
    )
    return jsonify(result), 200
