"""
Verification service - supplier identity documents.

A supplier becomes verified once every required document type has an
approved document.
"""

import logging
from datetime import datetime
from typing import Optional

from ..extensions import db
from ..models import (
    VerificationDocument, DocumentType, DocumentStatus, Supplier, User,
    REQUIRED_DOCUMENT_TYPES, DOCUMENT_TYPE_LABELS
)
from . import notification_service
from .errors import InvalidRequestError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def _parse_document_type(value: str) -> DocumentType:
    try:
        return DocumentType(value)
    except ValueError:
        raise InvalidRequestError(f'Type de document invalide: {value}')


def _get_supplier(supplier_id: int) -> Supplier:
    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        raise NotFoundError('Fournisseur non trouvé')
    return supplier


def upload_document(user: User, supplier_id: int, document_type: str,
                    document_url: str, document_name: Optional[str] = None) -> VerificationDocument:
    """
    Stores a document URL for the supplier. Re-uploading a type replaces
    the previous document and sends it back to review.
    """
    supplier = _get_supplier(supplier_id)
    if supplier.user_id != user.id:
        raise PermissionDeniedError(
            "Vous n'êtes pas autorisé à télécharger des documents pour ce fournisseur"
        )

    type_enum = _parse_document_type(document_type)
    document = VerificationDocument.query.filter_by(
        supplier_id=supplier.id, document_type=type_enum
    ).first()

    if document is None:
        document = VerificationDocument(supplier_id=supplier.id, document_type=type_enum)
        db.session.add(document)

    document.document_url = document_url
    document.document_name = document_name
    document.status = DocumentStatus.PENDING
    document.uploaded_at = datetime.utcnow()
    document.reviewed_at = None
    document.reviewed_by = None
    document.rejection_reason = None

    db.session.commit()
    logger.info('Verification document %s uploaded for supplier %s', type_enum.value, supplier.id)
    return document


def list_documents(user: User, supplier_id: int):
    """Supplier owner or admin."""
    supplier = _get_supplier(supplier_id)
    if supplier.user_id != user.id and not user.is_platform_admin:
        raise PermissionDeniedError('Accès non autorisé')
    return supplier.documents.order_by(VerificationDocument.id).all()


def _all_required_approved(supplier_id: int) -> bool:
    approved_types = {
        doc.document_type for doc in VerificationDocument.query.filter_by(
            supplier_id=supplier_id, status=DocumentStatus.APPROVED
        ).all()
    }
    return all(t in approved_types for t in REQUIRED_DOCUMENT_TYPES)


def review_document(reviewer: User, document_id: int, status: str,
                    rejection_reason: Optional[str] = None) -> dict:
    """
    Admin decision on a document.

    Returns:
        {'success': True, 'all_documents_approved': bool}
    """
    document = db.session.get(VerificationDocument, document_id)
    if not document:
        raise NotFoundError('Document non trouvé')

    if status not in (DocumentStatus.APPROVED.value, DocumentStatus.REJECTED.value):
        raise InvalidRequestError(f'Statut invalide: {status}')

    document.status = DocumentStatus(status)
    document.rejection_reason = rejection_reason
    document.reviewed_at = datetime.utcnow()
    document.reviewed_by = reviewer.id
    db.session.flush()

    all_approved = _all_required_approved(document.supplier_id)
    if all_approved:
        supplier = document.supplier
        if not supplier.verified:
            supplier.verified = True
            notification_service.notify_verification_completed(supplier)
            logger.info('Supplier %s verified', supplier.id)

    db.session.commit()
    return {'success': True, 'all_documents_approved': all_approved}


def list_pending_documents():
    """Admin queue, oldest upload first."""
    documents = VerificationDocument.query.filter_by(
        status=DocumentStatus.PENDING
    ).order_by(VerificationDocument.uploaded_at).all()

    result = []
    for doc in documents:
        data = doc.to_dict()
        data['supplier_name'] = doc.supplier.business_name if doc.supplier else 'Unknown'
        data['supplier_email'] = doc.supplier.email if doc.supplier else 'Unknown'
        result.append(data)
    return result


def verification_status(supplier_id: int) -> dict:
    """Public summary of the supplier's documents."""
    documents = {
        doc.document_type: doc
        for doc in VerificationDocument.query.filter_by(supplier_id=supplier_id).all()
    }

    entries = []
    for type_enum in DocumentType:
        doc = documents.get(type_enum)
        entries.append({
            'type': type_enum.value,
            'label': DOCUMENT_TYPE_LABELS[type_enum],
            'required': type_enum in REQUIRED_DOCUMENT_TYPES,
            'uploaded': doc is not None,
            'status': doc.status.value if doc else 'not_uploaded',
            'rejection_reason': doc.rejection_reason if doc else None,
        })

    required = [e for e in entries if e['required']]
    required_uploaded = all(e['uploaded'] for e in required)
    all_approved = all(e['status'] == DocumentStatus.APPROVED.value for e in required)

    return {
        'documents': entries,
        'required_uploaded': required_uploaded,
        'all_approved': all_approved,
        'can_be_verified': required_uploaded and all_approved,
    }
