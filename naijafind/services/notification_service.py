"""
Notification service - in-app notifications.

The notify_* helpers add the notification to the session without
committing; the calling service commits together with its own changes.
"""

import logging
from typing import Optional

from ..extensions import db
from ..models import Notification, NotificationType, User
from ..utils.currency import format_naira
from .errors import InvalidRequestError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 50


def _parse_type(value: Optional[str]) -> NotificationType:
    if not value:
        return NotificationType.SYSTEM
    try:
        return NotificationType(value)
    except ValueError:
        raise InvalidRequestError(f'Type de notification invalide: {value}')


def _add(user_id: int, type_: NotificationType, title: str, message: str,
         data: Optional[dict] = None, action_url: Optional[str] = None) -> Notification:
    notification = Notification(
        user_id=user_id,
        type=type_,
        title=title,
        message=message,
        data=data,
        action_url=action_url,
        read=False
    )
    db.session.add(notification)
    return notification


# ============== Queries ==============

def list_notifications(user: User, limit: Optional[int] = None, only_unread: bool = False):
    """Newest first."""
    query = Notification.query.filter_by(user_id=user.id)
    if only_unread:
        query = query.filter_by(read=False)
    return query.order_by(
        Notification.created_at.desc(), Notification.id.desc()
    ).limit(limit or DEFAULT_LIST_LIMIT).all()


def unread_count(user: Optional[User]) -> int:
    """0 for anonymous callers."""
    if user is None:
        return 0
    return Notification.query.filter_by(user_id=user.id, read=False).count()


# ============== Mutations ==============

def create_notification(caller: User, user_id: int, type_: Optional[str], title: str,
                        message: str, data: Optional[dict] = None,
                        action_url: Optional[str] = None) -> Notification:
    """Users may notify themselves, admins anyone."""
    if user_id != caller.id and not caller.is_platform_admin:
        raise PermissionDeniedError()
    if not db.session.get(User, user_id):
        raise NotFoundError('Utilisateur introuvable')

    notification = _add(user_id, _parse_type(type_), title, message, data, action_url)
    db.session.commit()
    return notification


def _get_owned(user: User, notification_id: int) -> Notification:
    notification = db.session.get(Notification, notification_id)
    if not notification:
        raise NotFoundError('Notification introuvable')
    if notification.user_id != user.id:
        raise PermissionDeniedError()
    return notification


def mark_as_read(user: User, notification_id: int) -> Notification:
    notification = _get_owned(user, notification_id)
    notification.read = True
    db.session.commit()
    return notification


def mark_all_as_read(user: User) -> int:
    """Marks every unread notification of the user. Returns how many changed."""
    unread = Notification.query.filter_by(user_id=user.id, read=False).all()
    for notification in unread:
        notification.read = True
    db.session.commit()
    return len(unread)


def delete_notification(user: User, notification_id: int):
    notification = _get_owned(user, notification_id)
    db.session.delete(notification)
    db.session.commit()


def send_admin_notification(user_id: int, title: str, message: str,
                            type_: Optional[str] = None,
                            action_url: Optional[str] = None) -> Notification:
    if not db.session.get(User, user_id):
        raise NotFoundError('Utilisateur introuvable')
    notification = _add(user_id, _parse_type(type_), title, message,
                        {'from_admin': True}, action_url)
    db.session.commit()
    return notification


def send_bulk_notification(user_ids, title: str, message: str,
                           type_: Optional[str] = None) -> int:
    """Sends the same notification to many users. Unknown ids are skipped."""
    type_enum = _parse_type(type_)
    existing_ids = [
        row.id for row in db.session.query(User.id).filter(User.id.in_(list(user_ids))).all()
    ]
    for user_id in existing_ids:
        _add(user_id, type_enum, title, message, {'from_admin': True, 'bulk': True})
    db.session.commit()
    logger.info('Bulk notification sent to %d users', len(existing_ids))
    return len(existing_ids)


# ============== Event notifications (no commit) ==============

def notify_new_order(supplier_user_id: int, order, customer_name: str):
    return _add(
        supplier_user_id,
        NotificationType.ORDER,
        'Nouvelle commande',
        f'Commande {order.order_number} de {customer_name} pour {format_naira(order.total_amount)}',
        {'order_id': order.id, 'order_number': order.order_number},
        '/dashboard?tab=orders'
    )


def notify_new_review(supplier_user_id: int, review, reviewer_name: str):
    return _add(
        supplier_user_id,
        NotificationType.REVIEW,
        'Nouvel avis client',
        f'{reviewer_name} a laissé un avis de {review.rating}/5 étoiles',
        {'review_id': review.id, 'rating': review.rating},
        '/dashboard?tab=reviews'
    )


def notify_new_message(supplier_user_id: int, message_id: int, sender_name: str, subject: str):
    return _add(
        supplier_user_id,
        NotificationType.MESSAGE,
        'Nouveau message',
        f'{sender_name}: {subject}',
        {'message_id': message_id}
    )


def notify_welcome(user_id: int, user_name: Optional[str] = None):
    return _add(
        user_id,
        NotificationType.SYSTEM,
        'Bienvenue sur Olufinja !',
        f'Bonjour {user_name or ""}, votre compte a été créé avec succès. '
        'Complétez votre profil pour commencer.',
        {'type': 'welcome', 'is_new_account': True},
        '/dashboard?tab=profile'
    )


def notify_supplier_approved(supplier):
    return _add(
        supplier.user_id,
        NotificationType.APPROVAL,
        'Félicitations ! Votre profil est approuvé',
        f'Votre entreprise "{supplier.business_name}" a été validée par notre équipe. '
        'Vous pouvez maintenant recevoir des commandes.',
        {'supplier_id': supplier.id, 'type': 'supplier_approved'},
        '/dashboard'
    )


def notify_supplier_rejected(supplier, reason: Optional[str] = None):
    suffix = f': {reason}' if reason else ". Contactez-nous pour plus d'informations."
    return _add(
        supplier.user_id,
        NotificationType.SYSTEM,
        'Mise à jour de votre inscription',
        f'Votre demande pour "{supplier.business_name}" n\'a pas pu être approuvée{suffix}',
        {'type': 'supplier_rejected', 'reason': reason},
        '/contact'
    )


def notify_verification_completed(supplier):
    return _add(
        supplier.user_id,
        NotificationType.VERIFICATION,
        'Vérification complétée',
        f'Votre entreprise "{supplier.business_name}" est maintenant vérifiée et approuvée.',
        {'supplier_id': supplier.id, 'type': 'verification_completed'},
        '/dashboard?tab=verification'
    )
