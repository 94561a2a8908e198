"""
Admin moderation tests - supplier approval, flags, deletion, order overview.
"""
import pytest

from naijafind.models import Supplier, Product, Notification, NotificationType


@pytest.fixture
def pending_supplier(supplier_factory, user_factory):
    owner = user_factory('sub_pending', 'pending@test.ng')
    return supplier_factory(owner, 'Pending Shop', approved=False)


class TestApproval:

    def test_list_filtered_by_approval(self, admin_client, supplier, pending_supplier):
        res = admin_client.get('/api/admin/suppliers?approved=false')
        assert [s['business_name'] for s in res.get_json()['suppliers']] == ['Pending Shop']
        assert len(admin_client.get('/api/admin/suppliers').get_json()['suppliers']) == 2

    def test_approve_makes_searchable_and_notifies(self, admin_client, client, pending_supplier, db, reload):
        res = admin_client.post(f'/api/admin/suppliers/{pending_supplier.id}/approve')
        assert res.status_code == 200
        assert reload(Supplier, pending_supplier.id).approved is True

        note = Notification.query.filter_by(user_id=pending_supplier.user_id).one()
        assert note.type == NotificationType.APPROVAL

        names = [s['business_name'] for s in client.get('/api/public/suppliers/search').get_json()['suppliers']]
        assert 'Pending Shop' in names

    def test_reject_with_reason(self, admin_client, supplier, db, reload):
        res = admin_client.post(f'/api/admin/suppliers/{supplier.id}/reject',
                                json={'reason': 'Incomplete address'})
        assert res.status_code == 200
        assert reload(Supplier, supplier.id).approved is False
        note = Notification.query.filter_by(user_id=supplier.user_id).one()
        assert 'Incomplete address' in note.message

    def test_feature_and_verify_flags(self, admin_client, supplier, reload):
        admin_client.post(f'/api/admin/suppliers/{supplier.id}/feature', json={'featured': True})
        admin_client.post(f'/api/admin/suppliers/{supplier.id}/verify', json={'verified': True})
        row = reload(Supplier, supplier.id)
        assert row.featured is True
        assert row.verified is True

    def test_unknown_supplier_is_404(self, admin_client, db):
        assert admin_client.post('/api/admin/suppliers/999/approve').status_code == 404

    def test_non_admin_is_403(self, supplier_client, supplier):
        assert supplier_client.post(f'/api/admin/suppliers/{supplier.id}/approve').status_code == 403


class TestDeletion:

    def test_delete_cascades_products(self, admin_client, supplier, products, reload):
        supplier_id = supplier.id
        product_ids = [p.id for p in products]
        assert admin_client.delete(f'/api/admin/suppliers/{supplier_id}').status_code == 200
        assert reload(Supplier, supplier_id) is None
        assert all(reload(Product, pid) is None for pid in product_ids)


class TestOrderOverview:

    def test_all_orders_with_customer_info(self, admin_client, buyer_client, supplier, products):
        buyer_client.post('/api/v1/orders', json={
            'supplier_id': supplier.id,
            'shipping_address': {'full_name': 'Ada Obi', 'phone': '1', 'address': 'x',
                                 'city': 'Ikeja', 'state': 'Lagos'},
            'items': [{'product_id': products[0].id, 'quantity': 1}],
        })
        orders = admin_client.get(f'/api/admin/orders?supplier_id={supplier.id}').get_json()['orders']
        assert len(orders) == 1
        assert orders[0]['customer_name'] == 'Ada Obi'
        assert orders[0]['supplier_name'] == 'Lagos Agro Supplies'

        stats = admin_client.get('/api/admin/orders/stats').get_json()
        assert stats['total'] == 1
        assert stats['totalRevenue'] == pytest.approx(1500.0)

    def test_scheduler_status(self, admin_client):
        res = admin_client.get('/api/admin/scheduler/status')
        assert res.status_code == 200
        assert res.get_json()['running'] is False
