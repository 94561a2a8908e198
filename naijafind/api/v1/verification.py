"""
Verification API - supplier documents.

Files are uploaded by the client straight to the CDN; these endpoints
only record the resulting URL.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import jwt_required, user_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.verification import DocumentUploadRequest
from naijafind.services import verification_service

bp = Blueprint('verification', __name__, url_prefix='/verification')


@bp.route('/suppliers/<int:supplier_id>/documents', methods=['POST'])
@jwt_required
@user_required
def upload_document(supplier_id):
    data = parse_body(DocumentUploadRequest)
    document = verification_service.upload_document(
        g.current_user, supplier_id, data.document_type,
        data.document_url, data.document_name
    )
    return jsonify({'success': True, 'document_id': document.id}), 201


@bp.route('/suppliers/<int:supplier_id>/documents', methods=['GET'])
@jwt_required
@user_required
def list_documents(supplier_id):
    """Supplier owner or admin."""
    documents = verification_service.list_documents(g.current_user, supplier_id)
    return jsonify({'documents': [d.to_dict() for d in documents]}), 200
