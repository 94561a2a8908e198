"""
Verification documents uploaded by suppliers and reviewed by admins.
"""

import enum
from datetime import datetime
from ..extensions import db


class DocumentType(enum.Enum):
    BUSINESS_REGISTRATION = 'business_registration'
    TAX_CERTIFICATE = 'tax_certificate'
    ID_CARD = 'id_card'
    PROOF_OF_ADDRESS = 'proof_of_address'


class DocumentStatus(enum.Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


# All of these approved => supplier.verified
REQUIRED_DOCUMENT_TYPES = (
    DocumentType.BUSINESS_REGISTRATION,
    DocumentType.TAX_CERTIFICATE,
    DocumentType.ID_CARD,
)

DOCUMENT_TYPE_LABELS = {
    DocumentType.BUSINESS_REGISTRATION: 'Business Registration',
    DocumentType.TAX_CERTIFICATE: 'Tax Certificate',
    DocumentType.ID_CARD: 'ID Card',
    DocumentType.PROOF_OF_ADDRESS: 'Proof of Address (Optional)',
}


class VerificationDocument(db.Model):
    """One document per type per supplier; re-upload replaces it."""
    __tablename__ = 'verification_document'

    id = db.Column(db.Integer, primary_key=True)
    supplier_id = db.Column(
        db.Integer,
        db.ForeignKey('supplier.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    document_type = db.Column(db.Enum(DocumentType), nullable=False)
    document_url = db.Column(db.String(500), nullable=False)
    document_name = db.Column(db.String(255))

    status = db.Column(db.Enum(DocumentStatus), default=DocumentStatus.PENDING, nullable=False, index=True)
    rejection_reason = db.Column(db.Text)

    uploaded_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    reviewed_at = db.Column(db.DateTime)
    reviewed_by = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='SET NULL'))

    __table_args__ = (
        db.UniqueConstraint('supplier_id', 'document_type', name='uq_verification_document_type'),
    )

    def __repr__(self):
        return f'<VerificationDocument {self.id}: {self.document_type.value} {self.status.value}>'

    def to_dict(self):
        return {
            'id': self.id,
            'supplier_id': self.supplier_id,
            'document_type': self.document_type.value,
            'document_url': self.document_url,
            'document_name': self.document_name,
            'status': self.status.value,
            'rejection_reason': self.rejection_reason,
            'uploaded_at': self.uploaded_at.isoformat() if self.uploaded_at else None,
            'reviewed_at': self.reviewed_at.isoformat() if self.reviewed_at else None,
            'reviewed_by': self.reviewed_by,
        }
