"""
Bootstrap route tests - first-time setup without user auth.
"""
import pytest

from naijafind.models import Category, User, UserType


class TestOpenBootstrap:

    def test_init_seeds_defaults(self, client, db):
        res = client.get('/init')
        assert res.status_code == 200
        assert res.get_json()['success'] is True
        assert Category.query.count() > 0

    def test_custom_categories_init(self, client, db):
        res = client.post('/categories/init', json={'categories': [
            {'name': 'Solar', 'icon': 'ri-sun-line', 'order': 1},
            {'name': 'Logistics'},
        ]})
        assert res.get_json()['created'] == ['Solar', 'Logistics']

    def test_create_admin_accepts_camel_case(self, client, db):
        res = client.post('/admin/create', json={
            'email': 'Root@Test.ng', 'firstName': 'Ifeoma', 'lastName': 'Eze'
        })
        assert res.status_code == 200
        db.session.expire_all()
        user = User.query.filter_by(email='root@test.ng').one()
        assert user.user_type == UserType.ADMIN
        assert user.is_admin is True
        assert user.first_name == 'Ifeoma'
        assert user.auth_subject is None

    def test_create_admin_promotes_existing(self, client, buyer, reload):
        res = client.post('/admin/create', json={'email': buyer.email})
        assert 'est maintenant admin' in res.get_json()['message']
        assert reload(User, buyer.id).is_platform_admin is True

    def test_create_admin_requires_valid_email(self, client, db):
        assert client.post('/admin/create', json={'email': 'nope'}).status_code == 400


class TestTokenGuard:

    @pytest.fixture
    def guarded(self, app):
        app.config['BOOTSTRAP_TOKEN'] = 'setup-secret'
        yield
        app.config['BOOTSTRAP_TOKEN'] = ''

    def test_missing_token_is_401(self, client, guarded):
        assert client.post('/init').status_code == 401

    def test_valid_token(self, client, guarded):
        res = client.post('/init', headers={'X-Bootstrap-Token': 'setup-secret'})
        assert res.status_code == 200


class TestAppShell:

    def test_health(self, client):
        assert client.get('/health').get_json() == {'status': 'healthy', 'service': 'naijafind'}

    def test_unknown_route_is_json_404(self, client):
        res = client.get('/api/v1/nothing-here')
        assert res.status_code == 404
        assert res.get_json()['error'] == 'Not Found'
