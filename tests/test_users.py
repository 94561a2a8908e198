"""
Account provisioning tests - ensure, sign-up, /me and auth errors.
"""
import pytest

from naijafind.models import User, UserType, Supplier, Notification
from naijafind.services import user_service
from naijafind.services.errors import PermissionDeniedError


SUPPLIER_SIGNUP = {
    'business_name': 'Kano Textiles',
    'email': 'sales@kanotextiles.ng',
    'phone': '+2348030000000',
    'category': 'Textile',
    'city': 'Kano',
    'state': 'Kano',
    'first_name': 'Musa',
}


class TestAuthentication:

    def test_missing_token_is_401(self, client):
        res = client.post('/api/v1/users/ensure', json={})
        assert res.status_code == 401

    def test_invalid_token_is_401(self, client):
        res = client.post('/api/v1/users/ensure', json={},
                          headers={'Authorization': 'Bearer not-a-jwt'})
        assert res.status_code == 401
        assert res.get_json()['error'] == 'Non autorisé'

    def test_me_anonymous_returns_null(self, client):
        res = client.get('/api/v1/users/me')
        assert res.status_code == 200
        assert res.get_json() is None


class TestEnsureUser:

    def test_creates_user_with_welcome_notification(self, auth_client, db, reload):
        c = auth_client('sub_new', 'New@Test.ng')
        res = c.post('/api/v1/users/ensure', json={'first_name': 'Chioma'})
        assert res.status_code == 200
        data = res.get_json()
        assert data['user']['email'] == 'new@test.ng'
        assert data['user']['user_type'] == 'user'
        assert data['supplier'] is None

        db.session.expire_all()
        user = User.query.filter_by(auth_subject='sub_new').one()
        notifications = Notification.query.filter_by(user_id=user.id).all()
        assert len(notifications) == 1
        assert notifications[0].type.value == 'system'

    def test_second_call_patches_without_duplicate(self, auth_client, db):
        c = auth_client('sub_twice', 'twice@test.ng')
        c.post('/api/v1/users/ensure', json={})
        res = c.post('/api/v1/users/ensure', json={'phone': '+2348099999999', 'user_type': 'supplier'})
        assert res.status_code == 200
        assert res.get_json()['user']['phone'] == '+2348099999999'
        assert res.get_json()['user']['user_type'] == 'supplier'

        db.session.expire_all()
        assert User.query.filter_by(email='twice@test.ng').count() == 1
        user = User.query.filter_by(email='twice@test.ng').one()
        assert Notification.query.filter_by(user_id=user.id).count() == 1

    def test_invalid_user_type_is_400(self, auth_client, db):
        res = auth_client('sub_bad', 'bad@test.ng').post(
            '/api/v1/users/ensure', json={'user_type': 'superuser'}
        )
        assert res.status_code == 400
        assert res.get_json()['error'] == 'Validation Error'

    def test_bootstrapped_admin_gets_subject_on_first_login(self, auth_client, user_factory, db, reload):
        admin = user_factory(None, 'boss@test.ng', UserType.ADMIN)
        res = auth_client('sub_boss', 'boss@test.ng').get('/api/v1/users/me')
        assert res.status_code == 200
        assert res.get_json()['user']['id'] == admin.id
        assert reload(User, admin.id).auth_subject == 'sub_boss'


class TestSignUp:

    def test_sign_up_buyer(self, auth_client, db):
        res = auth_client('sub_buyer', 'b@test.ng').post(
            '/api/v1/users/signup/buyer', json={'first_name': 'Ngozi'}
        )
        assert res.status_code == 200
        assert res.get_json() == {'success': True}

        db.session.expire_all()
        user = User.query.filter_by(auth_subject='sub_buyer').one()
        assert user.user_type == UserType.USER
        assert user.first_name == 'Ngozi'

    def test_sign_up_supplier_creates_pending_profile(self, auth_client, db, reload):
        res = auth_client('sub_kano', 'musa@test.ng').post(
            '/api/v1/users/signup/supplier', json=SUPPLIER_SIGNUP
        )
        assert res.status_code == 201
        supplier = reload(Supplier, res.get_json()['id'])
        assert supplier.approved is False
        assert supplier.verified is False
        assert supplier.rating == 0
        assert supplier.location == 'Kano, Kano'
        assert supplier.slug == 'kano-textiles'
        assert supplier.business_hours['sunday'] == 'closed'
        assert supplier.owner.user_type == UserType.SUPPLIER

    def test_sign_up_supplier_twice_returns_same_profile(self, auth_client, db):
        c = auth_client('sub_kano', 'musa@test.ng')
        first = c.post('/api/v1/users/signup/supplier', json=SUPPLIER_SIGNUP)
        second = c.post('/api/v1/users/signup/supplier', json=SUPPLIER_SIGNUP)
        assert second.status_code == 200
        assert second.get_json()['id'] == first.get_json()['id']

        db.session.expire_all()
        assert Supplier.query.count() == 1

    def test_slug_collision_gets_suffix(self, auth_client, db, reload):
        auth_client('sub_a', 'a@test.ng').post('/api/v1/users/signup/supplier', json=SUPPLIER_SIGNUP)
        res = auth_client('sub_b', 'b2@test.ng').post(
            '/api/v1/users/signup/supplier', json=SUPPLIER_SIGNUP
        )
        assert reload(Supplier, res.get_json()['id']).slug == 'kano-textiles-2'

    def test_sign_up_supplier_requires_business_fields(self, auth_client, db):
        res = auth_client('sub_x', 'x@test.ng').post(
            '/api/v1/users/signup/supplier', json={'business_name': 'X'}
        )
        assert res.status_code == 400
        fields = {tuple(d['loc']) for d in res.get_json()['details']}
        assert ('email',) in fields
        assert ('category',) in fields


class TestMe:

    def test_me_returns_user_and_supplier(self, supplier_client, supplier):
        res = supplier_client.get('/api/v1/users/me')
        assert res.status_code == 200
        data = res.get_json()
        assert data['user']['email'] == 'owner@test.ng'
        assert data['supplier']['id'] == supplier.id

    def test_me_unknown_identity_is_null(self, auth_client):
        res = auth_client('sub_ghost', 'ghost@test.ng').get('/api/v1/users/me')
        assert res.status_code == 200
        assert res.get_json() is None


class TestRoleEscalation:

    def test_ensure_cannot_request_admin(self, buyer_client, buyer, reload):
        res = buyer_client.post('/api/v1/users/ensure', json={'user_type': 'admin'})
        assert res.status_code == 400
        assert reload(User, buyer.id).is_admin is False
        assert buyer_client.get('/api/admin/categories').status_code == 403

    def test_service_refuses_admin_type(self, buyer, reload):
        with pytest.raises(PermissionDeniedError):
            user_service.ensure_user(
                {'subject': buyer.auth_subject, 'email': buyer.email}, user_type='admin'
            )
        user = reload(User, buyer.id)
        assert user.user_type == UserType.USER
        assert user.is_admin is False


class TestAccountBinding:

    def test_body_email_does_not_select_existing_user(self, auth_client, buyer, reload):
        c = auth_client('sub_other', None)
        res = c.post('/api/v1/users/ensure', json={
            'email': 'buyer@test.ng', 'first_name': 'Emeka', 'user_type': 'supplier'
        })
        assert res.status_code == 409
        user = reload(User, buyer.id)
        assert user.first_name == 'Ada'
        assert user.user_type == UserType.USER
        assert user.auth_subject == 'user_buyer'

    def test_token_email_bound_to_other_subject_is_rejected(self, auth_client, buyer, reload):
        res = auth_client('sub_other', 'buyer@test.ng').post(
            '/api/v1/users/ensure', json={'first_name': 'Emeka'}
        )
        assert res.status_code == 409
        assert reload(User, buyer.id).first_name == 'Ada'

    def test_me_ignores_user_bound_to_other_subject(self, auth_client, buyer):
        res = auth_client('sub_other', 'buyer@test.ng').get('/api/v1/users/me')
        assert res.status_code == 200
        assert res.get_json() is None

    def test_body_email_names_new_account_without_token_email(self, auth_client, db):
        res = auth_client('sub_fresh', None).post(
            '/api/v1/users/ensure', json={'email': 'Fresh@Test.ng'}
        )
        assert res.status_code == 200
        assert res.get_json()['user']['email'] == 'fresh@test.ng'
