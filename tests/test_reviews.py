"""
Review tests - one review per buyer, rating aggregate, supplier moderation.
"""
import pytest

from naijafind.models import Supplier, Notification


@pytest.fixture
def review(buyer_client, supplier):
    res = buyer_client.post('/api/v1/reviews', json={
        'supplier_id': supplier.id, 'rating': 4, 'comment': 'Fast delivery'
    })
    assert res.status_code == 201
    return res.get_json()['review_id']


class TestCreateReview:

    def test_updates_rating_and_count(self, review, supplier, reload):
        supplier = reload(Supplier, supplier.id)
        assert supplier.rating == 4
        assert supplier.reviews_count == 1

    def test_average_of_two_reviews(self, review, supplier, auth_client, reload):
        res = auth_client('sub_second', 'second@test.ng').post('/api/v1/reviews', json={
            'supplier_id': supplier.id, 'rating': 1
        })
        assert res.status_code == 201
        assert reload(Supplier, supplier.id).rating == pytest.approx(2.5)

    def test_duplicate_is_409(self, review, buyer_client, supplier):
        res = buyer_client.post('/api/v1/reviews', json={'supplier_id': supplier.id, 'rating': 5})
        assert res.status_code == 409

    def test_rating_out_of_range_is_400(self, buyer_client, supplier):
        for rating in (0, 6):
            res = buyer_client.post('/api/v1/reviews', json={'supplier_id': supplier.id, 'rating': rating})
            assert res.status_code == 400

    def test_unknown_supplier_is_404(self, buyer_client, db):
        res = buyer_client.post('/api/v1/reviews', json={'supplier_id': 999, 'rating': 3})
        assert res.status_code == 404
        assert res.get_json()['error'] == 'Fournisseur non trouvé'

    def test_owner_notified(self, review, supplier_user, db):
        db.session.expire_all()
        note = Notification.query.filter_by(user_id=supplier_user.id).one()
        assert note.type.value == 'review'


class TestModeration:

    def test_supplier_lists_and_replies(self, supplier_client, review):
        reviews = supplier_client.get('/api/v1/reviews').get_json()['reviews']
        assert [r['id'] for r in reviews] == [review]

        res = supplier_client.put(f'/api/v1/reviews/{review}', json={'response': 'Thank you!'})
        assert res.status_code == 200
        assert res.get_json()['review']['response'] == 'Thank you!'

    def test_soft_delete_excluded_from_rating(self, supplier_client, review, supplier, reload):
        res = supplier_client.put(f'/api/v1/reviews/{review}', json={'status': 'deleted'})
        assert res.status_code == 200
        supplier = reload(Supplier, supplier.id)
        assert supplier.rating == 0
        assert supplier.reviews_count == 0

    def test_hard_delete_recomputes(self, supplier_client, review, supplier, reload):
        assert supplier_client.delete(f'/api/v1/reviews/{review}').status_code == 200
        assert reload(Supplier, supplier.id).reviews_count == 0

    def test_reviewer_cannot_moderate(self, buyer_client, review):
        res = buyer_client.put(f'/api/v1/reviews/{review}', json={'status': 'hidden'})
        assert res.status_code == 403
