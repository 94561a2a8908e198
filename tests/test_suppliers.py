"""
Supplier self-service tests - profile update and dashboard.
"""
import pytest

from naijafind.models import Supplier, Order, OrderStatus, PaymentStatus, Review, ReviewStatus

PROFILE = {
    'business_name': 'Lagos Agro Supplies Ltd',
    'email': 'hello@lagosagro.ng',
    'category': 'Agriculture',
    'city': 'Ikeja',
    'state': 'Lagos',
    'description': 'Seeds, fertilizer and irrigation kits',
}


class TestProfile:

    def test_get_profile(self, supplier_client, supplier):
        res = supplier_client.get('/api/v1/supplier/profile')
        assert res.status_code == 200
        assert res.get_json()['supplier']['id'] == supplier.id

    def test_update_recomputes_location(self, supplier_client, supplier, reload):
        res = supplier_client.put('/api/v1/supplier/profile', json=PROFILE)
        assert res.status_code == 200
        row = reload(Supplier, supplier.id)
        assert row.business_name == 'Lagos Agro Supplies Ltd'
        assert row.location == 'Ikeja, Lagos'

    def test_business_hours_default_when_missing(self, supplier_client, supplier, reload):
        supplier_client.put('/api/v1/supplier/profile', json=PROFILE)
        hours = reload(Supplier, supplier.id).business_hours
        assert hours['monday'] == '08:00-18:00'
        assert hours['sunday'] == 'closed'

    def test_business_hours_kept_from_request(self, supplier_client, supplier, reload):
        body = {**PROFILE, 'business_hours': {'monday': '07:00-15:00'}}
        supplier_client.put('/api/v1/supplier/profile', json=body)
        assert reload(Supplier, supplier.id).business_hours == {'monday': '07:00-15:00'}

    def test_coordinates_kept_when_not_sent(self, supplier_client, supplier, reload):
        supplier_client.put('/api/v1/supplier/profile', json=PROFILE)
        assert reload(Supplier, supplier.id).latitude == pytest.approx(6.5244)

    def test_update_requires_core_fields(self, supplier_client, supplier):
        res = supplier_client.put('/api/v1/supplier/profile', json={'business_name': 'Only name'})
        assert res.status_code == 400

    def test_buyer_has_no_profile(self, buyer_client):
        res = buyer_client.get('/api/v1/supplier/profile')
        assert res.status_code == 404


class TestDashboard:

    def test_stats(self, supplier_client, db, supplier, products, buyer):
        db.session.add_all([
            Order(order_number='ORD-A-0001', supplier_id=supplier.id, customer_id=buyer.id,
                  total_amount=1000, status=OrderStatus.DELIVERED, payment_status=PaymentStatus.PAID),
            Order(order_number='ORD-A-0002', supplier_id=supplier.id, customer_id=buyer.id,
                  total_amount=500, status=OrderStatus.PENDING, payment_status=PaymentStatus.PENDING),
            Review(supplier_id=supplier.id, user_id=buyer.id, rating=4, status=ReviewStatus.PUBLISHED),
        ])
        db.session.commit()

        data = supplier_client.get('/api/v1/supplier/dashboard').get_json()
        assert data['profile']['id'] == supplier.id
        assert data['stats'] == {
            'totalOrders': 2,
            'totalProducts': 2,
            'totalReviews': 1,
            'averageRating': 4.0,
            'monthlyRevenue': 1000.0,
        }
        assert len(data['recentOrders']) == 2
        assert len(data['recentReviews']) == 1
