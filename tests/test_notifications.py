"""
Notification tests - ownership, read state, admin broadcast.
"""
import pytest

from naijafind.models import Notification, NotificationType


@pytest.fixture
def inbox(db, buyer):
    """Three notifications for the buyer, one already read."""
    rows = [
        Notification(user_id=buyer.id, type=NotificationType.SYSTEM, title='A', message='a'),
        Notification(user_id=buyer.id, type=NotificationType.ORDER, title='B', message='b'),
        Notification(user_id=buyer.id, type=NotificationType.REVIEW, title='C', message='c', read=True),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows


class TestInbox:

    def test_list_newest_first(self, buyer_client, inbox):
        titles = [n['title'] for n in buyer_client.get('/api/v1/notifications').get_json()['notifications']]
        assert titles == ['C', 'B', 'A']

    def test_only_unread_and_limit(self, buyer_client, inbox):
        res = buyer_client.get('/api/v1/notifications?only_unread=true&limit=1')
        assert [n['title'] for n in res.get_json()['notifications']] == ['B']

    def test_unread_count(self, buyer_client, inbox):
        assert buyer_client.get('/api/v1/notifications/unread-count').get_json() == {'count': 2}

    def test_unread_count_anonymous_is_zero(self, client, db):
        res = client.get('/api/v1/notifications/unread-count')
        assert res.status_code == 200
        assert res.get_json() == {'count': 0}

    def test_mark_as_read(self, buyer_client, inbox, reload):
        res = buyer_client.post(f'/api/v1/notifications/{inbox[0].id}/read')
        assert res.status_code == 200
        assert reload(Notification, inbox[0].id).read is True

    def test_mark_all_as_read(self, buyer_client, inbox, supplier_user, db, reload):
        foreign = Notification(user_id=supplier_user.id, type=NotificationType.SYSTEM,
                               title='D', message='d')
        db.session.add(foreign)
        db.session.commit()

        res = buyer_client.post('/api/v1/notifications/read-all')
        assert res.get_json() == {'success': True, 'count': 2}
        assert buyer_client.get('/api/v1/notifications/unread-count').get_json()['count'] == 0
        assert all(reload(Notification, n.id).read is True for n in inbox)
        assert reload(Notification, foreign.id).read is False

    def test_delete(self, buyer_client, inbox, reload):
        notification_id = inbox[1].id
        assert buyer_client.delete(f'/api/v1/notifications/{notification_id}').status_code == 200
        assert reload(Notification, notification_id) is None


class TestOwnership:

    def test_cannot_read_foreign_notification(self, supplier_client, inbox):
        assert supplier_client.post(f'/api/v1/notifications/{inbox[0].id}/read').status_code == 403
        assert supplier_client.delete(f'/api/v1/notifications/{inbox[0].id}').status_code == 403

    def test_create_for_self(self, buyer_client, buyer):
        res = buyer_client.post('/api/v1/notifications', json={'title': 'Reminder', 'message': 'Pay'})
        assert res.status_code == 201

    def test_create_for_other_user_forbidden(self, buyer_client, supplier_user):
        res = buyer_client.post('/api/v1/notifications', json={
            'user_id': supplier_user.id, 'title': 'Spam', 'message': 'x'
        })
        assert res.status_code == 403

    def test_invalid_type_is_400(self, buyer_client, buyer):
        res = buyer_client.post('/api/v1/notifications', json={
            'type': 'promo', 'title': 'x', 'message': 'x'
        })
        assert res.status_code == 400


class TestAdminBroadcast:

    def test_admin_sends_to_user(self, admin_client, buyer, db):
        res = admin_client.post('/api/admin/notifications', json={
            'user_id': buyer.id, 'title': 'Maintenance', 'message': 'Tonight'
        })
        assert res.status_code == 201
        db.session.expire_all()
        note = Notification.query.filter_by(user_id=buyer.id).one()
        assert note.data == {'from_admin': True}

    def test_bulk_skips_unknown_users(self, admin_client, buyer, supplier_user):
        res = admin_client.post('/api/admin/notifications/bulk', json={
            'user_ids': [buyer.id, supplier_user.id, 999], 'title': 'Hello', 'message': 'All'
        })
        assert res.status_code == 201
        assert res.get_json()['count'] == 2

    def test_non_admin_is_403(self, buyer_client, buyer):
        res = buyer_client.post('/api/admin/notifications', json={
            'user_id': buyer.id, 'title': 'x', 'message': 'x'
        })
        assert res.status_code == 403
