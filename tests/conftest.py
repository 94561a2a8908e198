"""
Test fixtures for the NaijaFind API.

Setup:
- buyer: plain user
- supplier_user + supplier: approved supplier in Lagos with two products
- admin: platform admin
Each client fixture sends a Bearer token for its user.
"""
import pytest

from naijafind import create_app
from naijafind.config import TestingConfig
from naijafind.extensions import db as _db
from naijafind.models import User, UserType, Supplier, Product, ProductStatus
from naijafind.api.middleware.jwt_utils import create_access_token


class ApiTestConfig(TestingConfig):
    """Isolated from the local environment."""
    from datetime import timedelta
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    JWT_ISSUER = None
    JWT_AUDIENCE = None
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SCHEDULER_ENABLED = False
    BOOTSTRAP_TOKEN = ''
    RESEND_API_KEY = ''


@pytest.fixture(scope='session')
def app():
    """Flask app for the test session."""
    app = create_app(ApiTestConfig)
    yield app


@pytest.fixture(scope='function')
def db(app):
    """Clean database for every test."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app, db):
    """Anonymous client."""
    return app.test_client()


def make_user(db, subject, email, user_type=UserType.USER, **fields):
    user = User(
        email=email, auth_subject=subject, user_type=user_type,
        is_admin=user_type == UserType.ADMIN, **fields
    )
    db.session.add(user)
    db.session.commit()
    return user


def make_supplier(db, owner, business_name='Lagos Agro Supplies', **fields):
    values = dict(
        user_id=owner.id,
        business_name=business_name,
        slug=business_name.lower().replace(' ', '-'),
        email=f'{owner.auth_subject}@shop.ng',
        phone='+2348012345678',
        description='Fertilizer and farm equipment',
        category='Agriculture',
        city='Lagos',
        state='Lagos',
        location='Lagos, Lagos',
        latitude=6.5244,
        longitude=3.3792,
        approved=True,
        business_hours={},
        social_links={},
        image_gallery=[],
    )
    values.update(fields)
    supplier = Supplier(**values)
    db.session.add(supplier)
    db.session.commit()
    return supplier


@pytest.fixture
def buyer(db):
    return make_user(db, 'user_buyer', 'buyer@test.ng', first_name='Ada', last_name='Obi')


@pytest.fixture
def supplier_user(db):
    return make_user(db, 'user_supplier', 'owner@test.ng', UserType.SUPPLIER,
                     first_name='Tunde', last_name='Bello')


@pytest.fixture
def admin(db):
    return make_user(db, 'user_admin', 'admin@test.ng', UserType.ADMIN)


@pytest.fixture
def supplier(db, supplier_user):
    return make_supplier(db, supplier_user)


@pytest.fixture
def products(db, supplier):
    """Two products: 1500.00 x10 and 250.50 x3."""
    items = [
        Product(supplier_id=supplier.id, name='NPK Fertilizer', price=1500, stock=10,
                status=ProductStatus.ACTIVE),
        Product(supplier_id=supplier.id, name='Hand Hoe', price=250.50, stock=3,
                status=ProductStatus.ACTIVE),
    ]
    db.session.add_all(items)
    db.session.commit()
    return items


def _make_auth_header(subject, email):
    """Authorization header for an identity (needs an app context)."""
    token = create_access_token(subject, email)
    return {'Authorization': f'Bearer {token}'}


class AuthClient:
    """Test client that sends the Bearer token on every request."""

    def __init__(self, app, subject, email):
        self._client = app.test_client()
        self._headers = _make_auth_header(subject, email)

    def get(self, url, **kw):
        kw.setdefault('headers', {}).update(self._headers)
        return self._client.get(url, **kw)

    def post(self, url, **kw):
        kw.setdefault('headers', {}).update(self._headers)
        return self._client.post(url, **kw)

    def put(self, url, **kw):
        kw.setdefault('headers', {}).update(self._headers)
        return self._client.put(url, **kw)

    def delete(self, url, **kw):
        kw.setdefault('headers', {}).update(self._headers)
        return self._client.delete(url, **kw)


@pytest.fixture
def auth_client(app, db):
    """Factory: auth_client(subject, email) for identities without fixtures."""
    def factory(subject, email):
        return AuthClient(app, subject, email)
    return factory


@pytest.fixture
def buyer_client(app, db, buyer):
    return AuthClient(app, buyer.auth_subject, buyer.email)


@pytest.fixture
def supplier_client(app, db, supplier):
    return AuthClient(app, 'user_supplier', 'owner@test.ng')


@pytest.fixture
def admin_client(app, db, admin):
    return AuthClient(app, admin.auth_subject, admin.email)


@pytest.fixture
def reload(db):
    """reload(Model, id): row as committed by requests in their own session."""
    def _reload(model, pk):
        db.session.expire_all()
        return db.session.get(model, pk)
    return _reload


@pytest.fixture
def user_factory(db):
    def factory(subject, email, user_type=UserType.USER, **fields):
        return make_user(db, subject, email, user_type, **fields)
    return factory


@pytest.fixture
def supplier_factory(db):
    def factory(owner, business_name, **fields):
        return make_supplier(db, owner, business_name, **fields)
    return factory
