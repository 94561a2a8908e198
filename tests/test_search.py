"""
Supplier search tests - filters, radius, sorting and paging.
"""
import pytest

from naijafind.models import UserType, Review, ReviewStatus
from naijafind.utils.geo import haversine_km


@pytest.fixture
def directory(db, user_factory, supplier_factory):
    """
    Four approved suppliers and one pending:
    - Lagos Agro (Lagos, rating 4.5, 10 reviews, verified)
    - Ibadan Farms (Oyo, ~110 km from Lagos, rating 3.0, 25 reviews)
    - Abuja Builders (FCT, ~530 km from Lagos, rating 5.0, 2 reviews, verified)
    - Lekki Tools (Lagos, no coordinates, rating 4.0)
    - Hidden Pending (Lagos, not approved)
    """
    rows = [
        ('Lagos Agro', dict(category='Agriculture', rating=4.5, reviews_count=10, verified=True)),
        ('Ibadan Farms', dict(category='Agriculture', city='Ibadan', state='Oyo',
                              location='Ibadan, Oyo', latitude=7.3775, longitude=3.9470,
                              rating=3.0, reviews_count=25,
                              description='Cassava and yam wholesale')),
        ('Abuja Builders', dict(category='Construction', city='Abuja', state='FCT',
                                location='Abuja, FCT', latitude=9.0765, longitude=7.3986,
                                rating=5.0, reviews_count=2, verified=True)),
        ('Lekki Tools', dict(category='Construction', latitude=None, longitude=None,
                             location='Lekki, Lagos', rating=4.0, reviews_count=1)),
        ('Hidden Pending', dict(approved=False)),
    ]
    suppliers = {}
    for i, (name, fields) in enumerate(rows):
        owner = user_factory(f'owner_{i}', f'owner{i}@test.ng', UserType.SUPPLIER)
        suppliers[name] = supplier_factory(owner, name, **fields)
    return suppliers


def _names(res):
    assert res.status_code == 200
    return [s['business_name'] for s in res.get_json()['suppliers']]


class TestFilters:

    def test_only_approved_suppliers(self, client, directory):
        res = client.get('/api/public/suppliers/search')
        names = _names(res)
        assert 'Hidden Pending' not in names
        assert len(names) == 4
        assert res.get_json()['total'] == 4

    def test_relevance_keeps_insertion_order(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search'))
        assert names == ['Lagos Agro', 'Ibadan Farms', 'Abuja Builders', 'Lekki Tools']

    def test_text_matches_name_or_description_case_insensitive(self, client, directory):
        assert _names(client.get('/api/public/suppliers/search?q=CASSAVA')) == ['Ibadan Farms']
        assert _names(client.get('/api/public/suppliers/search?q=builders')) == ['Abuja Builders']

    def test_blank_text_is_ignored(self, client, directory):
        assert len(_names(client.get('/api/public/suppliers/search?q=%20%20'))) == 4

    def test_category_is_exact(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?category=Construction'))
        assert names == ['Abuja Builders', 'Lekki Tools']
        assert _names(client.get('/api/public/suppliers/search?category=construction')) == []

    def test_location_substring(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?location=lagos'))
        assert names == ['Lagos Agro', 'Lekki Tools']

    def test_min_rating_and_verified(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?min_rating=4&verified=true'))
        assert names == ['Lagos Agro', 'Abuja Builders']


class TestRadius:

    def test_default_radius_is_50_km(self, client, directory):
        res = client.get('/api/public/suppliers/search?lat=6.5244&lng=3.3792')
        suppliers = res.get_json()['suppliers']
        assert [s['business_name'] for s in suppliers] == ['Lagos Agro']
        assert suppliers[0]['distance'] == pytest.approx(0.0, abs=1e-6)

    def test_supplier_exactly_at_radius_included(self, client, directory):
        edge = haversine_km(6.5244, 3.3792, 7.3775, 3.9470)
        base = '/api/public/suppliers/search?lat=6.5244&lng=3.3792&radius_km='
        assert _names(client.get(f'{base}{edge!r}')) == ['Lagos Agro', 'Ibadan Farms']
        assert _names(client.get(f'{base}{edge - 0.001!r}')) == ['Lagos Agro']

    def test_supplier_without_coordinates_excluded(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?lat=6.5244&lng=3.3792&radius_km=1000'))
        assert 'Lekki Tools' not in names
        assert len(names) == 3

    def test_sort_by_distance(self, client, directory):
        res = client.get(
            '/api/public/suppliers/search?lat=6.5244&lng=3.3792&radius_km=1000&sort_by=distance'
        )
        suppliers = res.get_json()['suppliers']
        assert [s['business_name'] for s in suppliers] == ['Lagos Agro', 'Ibadan Farms', 'Abuja Builders']
        distances = [s['distance'] for s in suppliers]
        assert distances == sorted(distances)
        assert 100 < distances[1] < 130

    def test_distance_sort_without_point_keeps_order(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?sort_by=distance'))
        assert names == ['Lagos Agro', 'Ibadan Farms', 'Abuja Builders', 'Lekki Tools']


class TestSortingAndPaging:

    def test_sort_by_rating(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?sort_by=rating'))
        assert names == ['Abuja Builders', 'Lagos Agro', 'Lekki Tools', 'Ibadan Farms']

    def test_sort_by_reviews(self, client, directory):
        names = _names(client.get('/api/public/suppliers/search?sort_by=reviews'))
        assert names == ['Ibadan Farms', 'Lagos Agro', 'Abuja Builders', 'Lekki Tools']

    def test_invalid_sort_is_400(self, client, directory):
        res = client.get('/api/public/suppliers/search?sort_by=price')
        assert res.status_code == 400

    def test_limit_and_offset_after_filtering(self, client, directory):
        res = client.get('/api/public/suppliers/search?sort_by=rating&limit=2&offset=1')
        assert _names(res) == ['Lagos Agro', 'Lekki Tools']
        assert res.get_json()['total'] == 4


class TestHaversine:

    def test_same_point_is_zero(self):
        assert haversine_km(6.5, 3.3, 6.5, 3.3) == 0

    def test_lagos_to_abuja(self):
        assert haversine_km(6.5244, 3.3792, 9.0765, 7.3986) == pytest.approx(527, abs=10)


class TestSupplierDetails:

    def test_details_hide_unpublished_reviews(self, client, db, supplier, buyer, user_factory):
        other = user_factory('sub_other', 'other@test.ng')
        db.session.add_all([
            Review(supplier_id=supplier.id, user_id=buyer.id, rating=5, status=ReviewStatus.PUBLISHED),
            Review(supplier_id=supplier.id, user_id=other.id, rating=1, status=ReviewStatus.HIDDEN),
        ])
        db.session.commit()
        res = client.get(f'/api/public/suppliers/{supplier.id}')
        data = res.get_json()
        assert data['supplier']['business_name'] == 'Lagos Agro Supplies'
        assert len(data['reviews']) == 1
        assert data['reviews'][0]['author_name'] == 'Ada Obi'

    def test_unknown_supplier_is_null(self, client, db):
        res = client.get('/api/public/suppliers/999')
        assert res.status_code == 200
        assert res.get_json()['supplier'] is None
