"""
User service - account provisioning for identity provider users.

The identity provider authenticates; this service maps its identity
(subject + email) onto a local User row and manages the role.
"""

import logging
from typing import Optional

from slugify import slugify

from ..extensions import db
from ..models import User, UserType, Supplier, DEFAULT_BUSINESS_HOURS
from . import notification_service
from .email_service import email_service
from .errors import AuthenticationError, ConflictError, InvalidRequestError, PermissionDeniedError

logger = logging.getLogger(__name__)


def _parse_user_type(value: Optional[str]) -> Optional[UserType]:
    if value is None:
        return None
    try:
        return UserType(value)
    except ValueError:
        raise InvalidRequestError(f"Type d'utilisateur invalide: {value}")


def find_user(subject: Optional[str], email: Optional[str]) -> Optional[User]:
    """
    Finds the local user for an identity.

    Lookup by subject first; a user found by email gets the subject
    attached (admins bootstrapped before their first login). A row
    already bound to another subject is never returned.

    Args:
        subject: token `sub`
        email: token `email` claim, never a request body value
    """
    user = None
    if subject:
        user = User.query.filter_by(auth_subject=subject).first()
    if user is None and email:
        user = User.query.filter_by(email=email.strip().lower()).first()
        if user is not None and user.auth_subject and user.auth_subject != subject:
            return None
        if user is not None and subject and not user.auth_subject:
            user.auth_subject = subject
            db.session.commit()
    return user


def get_supplier_for_user(user: Optional[User]) -> Optional[Supplier]:
    if user is None:
        return None
    return Supplier.query.filter_by(user_id=user.id).first()


def ensure_user(identity: dict, user_type: Optional[str] = None,
                first_name: Optional[str] = None, last_name: Optional[str] = None,
                phone: Optional[str] = None, email: Optional[str] = None) -> dict:
    """
    Upserts the caller's user row.

    Existing user: role and profile fields are patched only when supplied
    and different. New user: created, welcomed by notification and email.

    Args:
        identity: {'subject': ..., 'email': ...} from the token

    Returns:
        {'user': User, 'supplier': Supplier | None, 'created': bool}
    """
    if not identity or not identity.get('subject'):
        raise AuthenticationError()

    type_enum = _parse_user_type(user_type)
    if type_enum == UserType.ADMIN:
        raise PermissionDeniedError()

    existing = find_user(identity.get('subject'), identity.get('email'))
    if existing:
        if type_enum and type_enum != existing.user_type:
            existing.user_type = type_enum
            existing.is_admin = False
        if phone and phone != existing.phone:
            existing.phone = phone
        if first_name and first_name != existing.first_name:
            existing.first_name = first_name
        if last_name and last_name != existing.last_name:
            existing.last_name = last_name
        db.session.commit()
        return {'user': existing, 'supplier': get_supplier_for_user(existing), 'created': False}

    # the body email only names a brand new account
    user_email = (identity.get('email') or email or '').strip().lower()
    if not user_email:
        raise InvalidRequestError('Email requis')
    if User.query.filter_by(email=user_email).first():
        raise ConflictError('Cet email est déjà utilisé')

    type_enum = type_enum or UserType.USER
    user = User(
        email=user_email,
        auth_subject=identity['subject'],
        user_type=type_enum,
        is_admin=False,
        phone=phone,
        first_name=first_name,
        last_name=last_name
    )
    db.session.add(user)
    db.session.flush()

    notification_service.notify_welcome(user.id, first_name)
    db.session.commit()
    logger.info('User created: %s (%s)', user.email, type_enum.value)

    result = email_service.send_welcome_email(user.email, first_name, type_enum.value)
    if not result['success']:
        logger.warning('Welcome email to %s failed: %s', user.email, result.get('error'))

    return {'user': user, 'supplier': None, 'created': True}


def sign_up_buyer(identity: dict, first_name=None, last_name=None, phone=None) -> dict:
    ensure_user(identity, user_type=UserType.USER.value,
                first_name=first_name, last_name=last_name, phone=phone)
    return {'success': True}


def _unique_slug(business_name: str) -> str:
    base = slugify(business_name) or 'supplier'
    slug = base
    counter = 2
    while Supplier.query.filter_by(slug=slug).first():
        slug = f'{base}-{counter}'
        counter += 1
    return slug


def sign_up_supplier(identity: dict, data: dict) -> dict:
    """
    Registers the caller as a supplier and creates the profile.

    A user owns at most one profile: a second call returns the id of the
    existing profile and creates nothing.

    Returns:
        {'id': supplier id, 'created': bool}
    """
    result = ensure_user(
        identity,
        user_type=UserType.SUPPLIER.value,
        first_name=data.get('first_name'),
        last_name=data.get('last_name'),
        phone=data.get('phone')
    )
    user = result['user']

    existing = get_supplier_for_user(user)
    if existing:
        logger.info('Supplier profile already exists for user %s', user.id)
        return {'id': existing.id, 'created': False}

    supplier = Supplier(
        user_id=user.id,
        business_name=data['business_name'],
        slug=_unique_slug(data['business_name']),
        email=data['email'],
        phone=data.get('phone'),
        description=data.get('description'),
        category=data['category'],
        address=data.get('address'),
        city=data['city'],
        state=data['state'],
        country=data.get('country'),
        latitude=data.get('latitude'),
        longitude=data.get('longitude'),
        location=f"{data['city']}, {data['state']}",
        website=data.get('website'),
        image=data.get('image'),
        image_gallery=data.get('image_gallery') or [],
        business_hours=dict(DEFAULT_BUSINESS_HOURS),
        social_links={},
        rating=0,
        reviews_count=0,
        verified=False,
        approved=False,
        featured=False
    )
    db.session.add(supplier)
    db.session.commit()
    logger.info('Supplier created: %s (user %s)', supplier.business_name, user.id)
    return {'id': supplier.id, 'created': True}


def me(identity: Optional[dict]) -> Optional[dict]:
    """{user, supplier} for the caller, None when anonymous or unknown."""
    if not identity or not identity.get('subject'):
        return None
    user = find_user(identity.get('subject'), identity.get('email'))
    if user is None:
        return None
    return {'user': user, 'supplier': get_supplier_for_user(user)}


def create_admin(email: str, first_name: Optional[str] = None,
                 last_name: Optional[str] = None, phone: Optional[str] = None) -> dict:
    """
    Promotes an existing user to admin or creates an admin user.

    A created admin has no subject yet; it is attached on first login
    with the same email.
    """
    email = email.strip().lower()
    existing = User.query.filter_by(email=email).first()

    if existing:
        existing.user_type = UserType.ADMIN
        existing.is_admin = True
        existing.first_name = first_name or existing.first_name
        existing.last_name = last_name or existing.last_name
        existing.phone = phone or existing.phone
        db.session.commit()
        logger.info('User %s promoted to admin', email)
        return {
            'success': True,
            'message': f"L'utilisateur {email} est maintenant admin",
            'id': existing.id,
        }

    user = User(
        email=email,
        user_type=UserType.ADMIN,
        is_admin=True,
        first_name=first_name,
        last_name=last_name,
        phone=phone
    )
    db.session.add(user)
    db.session.commit()
    logger.info('Admin user created: %s', email)
    return {
        'success': True,
        'message': f"Utilisateur admin créé pour {email}. "
                   "L'utilisateur devra se connecter avec cet email.",
        'id': user.id,
    }
