"""
Verification tests - document upload, admin review, verified flag.
"""
import pytest

from naijafind.models import Supplier, VerificationDocument, Notification, NotificationType

REQUIRED = ('business_registration', 'tax_certificate', 'id_card')


def _upload(client, supplier_id, document_type):
    return client.post(f'/api/v1/verification/suppliers/{supplier_id}/documents', json={
        'document_type': document_type,
        'document_url': f'https://files.test/{document_type}.pdf',
        'document_name': f'{document_type}.pdf',
    })


@pytest.fixture
def uploaded(supplier_client, supplier):
    """The three required documents, pending."""
    ids = {}
    for document_type in REQUIRED:
        res = _upload(supplier_client, supplier.id, document_type)
        assert res.status_code == 201
        ids[document_type] = res.get_json()['document_id']
    return ids


class TestUpload:

    def test_status_before_upload(self, client, supplier):
        data = client.get(f'/api/public/suppliers/{supplier.id}/verification-status').get_json()
        assert len(data['documents']) == 4
        assert all(d['status'] == 'not_uploaded' for d in data['documents'])
        assert data['required_uploaded'] is False
        assert data['can_be_verified'] is False
        optional = [d for d in data['documents'] if not d['required']]
        assert [d['type'] for d in optional] == ['proof_of_address']

    def test_only_owner_uploads(self, buyer_client, supplier):
        assert _upload(buyer_client, supplier.id, 'id_card').status_code == 403

    def test_invalid_type_is_400(self, supplier_client, supplier):
        assert _upload(supplier_client, supplier.id, 'passport').status_code == 400

    def test_reupload_replaces_and_resets(self, supplier_client, admin_client, supplier, uploaded, db):
        admin_client.post(f"/api/admin/verification/documents/{uploaded['id_card']}/review",
                          json={'status': 'rejected', 'rejection_reason': 'Blurry'})
        res = _upload(supplier_client, supplier.id, 'id_card')
        assert res.get_json()['document_id'] == uploaded['id_card']

        db.session.expire_all()
        document = db.session.get(VerificationDocument, uploaded['id_card'])
        assert document.status.value == 'pending'
        assert document.rejection_reason is None
        assert VerificationDocument.query.count() == 3

    def test_documents_visible_to_owner_and_admin(self, supplier_client, admin_client,
                                                  buyer_client, supplier, uploaded):
        url = f'/api/v1/verification/suppliers/{supplier.id}/documents'
        assert len(supplier_client.get(url).get_json()['documents']) == 3
        assert admin_client.get(url).status_code == 200
        assert buyer_client.get(url).status_code == 403


class TestReview:

    def test_pending_queue(self, admin_client, uploaded):
        documents = admin_client.get('/api/admin/verification/pending').get_json()['documents']
        assert len(documents) == 3
        assert documents[0]['supplier_name'] == 'Lagos Agro Supplies'

    def test_all_required_approved_verifies_supplier(self, admin_client, supplier, uploaded,
                                                     supplier_user, db, reload):
        results = []
        for document_id in uploaded.values():
            res = admin_client.post(f'/api/admin/verification/documents/{document_id}/review',
                                    json={'status': 'approved'})
            assert res.status_code == 200
            results.append(res.get_json()['all_documents_approved'])
        assert results == [False, False, True]

        assert reload(Supplier, supplier.id).verified is True
        notes = Notification.query.filter_by(
            user_id=supplier_user.id, type=NotificationType.VERIFICATION
        ).count()
        assert notes == 1

        status = admin_client.get(f'/api/public/suppliers/{supplier.id}/verification-status').get_json()
        assert status['all_approved'] is True
        assert status['can_be_verified'] is True

    def test_rejection_keeps_supplier_unverified(self, admin_client, supplier, uploaded, reload):
        res = admin_client.post(
            f"/api/admin/verification/documents/{uploaded['tax_certificate']}/review",
            json={'status': 'rejected', 'rejection_reason': 'Expired'}
        )
        assert res.get_json()['all_documents_approved'] is False
        assert reload(Supplier, supplier.id).verified is False

    def test_invalid_decision_is_400(self, admin_client, uploaded):
        res = admin_client.post(f"/api/admin/verification/documents/{uploaded['id_card']}/review",
                                json={'status': 'pending'})
        assert res.status_code == 400

    def test_unknown_document_is_404(self, admin_client, db):
        res = admin_client.post('/api/admin/verification/documents/999/review',
                                json={'status': 'approved'})
        assert res.status_code == 404

    def test_supplier_cannot_review(self, supplier_client, uploaded):
        res = supplier_client.post(f"/api/admin/verification/documents/{uploaded['id_card']}/review",
                                   json={'status': 'approved'})
        assert res.status_code == 403
