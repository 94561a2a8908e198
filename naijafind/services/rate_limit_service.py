"""
Rate limiter - database backed spam protection for public forms.

Each limited action writes a RateLimitAttempt row; the check counts the
rows of an (identifier, action) pair inside the sliding window. Old rows
are purged by the hourly scheduler job.

Actions in use:
- contact_form      site contact form, per email
- supplier_message  buyer to supplier message, per email
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from flask import current_app

from ..extensions import db
from ..models import RateLimitAttempt
from .errors import RateLimitError

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding window counter over RateLimitAttempt rows."""

    def _default_limit(self) -> int:
        return current_app.config.get('RATE_LIMIT_DEFAULT_ATTEMPTS', 5)

    def _default_window(self) -> int:
        return current_app.config.get('RATE_LIMIT_WINDOW_MINUTES', 60)

    def check(self, identifier: str, action: str, limit: Optional[int] = None,
              window_minutes: Optional[int] = None) -> dict:
        """
        Checks whether another attempt is allowed.

        Returns:
            {'allowed': bool, 'remaining': int, 'reset_at': datetime}
            reset_at is when the oldest attempt in the window expires.
        """
        limit = limit or self._default_limit()
        window = timedelta(minutes=window_minutes or self._default_window())
        now = datetime.utcnow()

        attempts = RateLimitAttempt.query.filter(
            RateLimitAttempt.identifier == identifier,
            RateLimitAttempt.action == action,
            RateLimitAttempt.timestamp > now - window
        ).order_by(RateLimitAttempt.timestamp).all()

        count = len(attempts)
        reset_at = (attempts[0].timestamp if attempts else now) + window
        return {
            'allowed': count < limit,
            'remaining': max(0, limit - count),
            'reset_at': reset_at,
        }

    def record(self, identifier: str, action: str):
        db.session.add(RateLimitAttempt(identifier=identifier, action=action))
        db.session.commit()

    def enforce(self, identifier: str, action: str, limit: Optional[int] = None,
                window_minutes: Optional[int] = None):
        """
        Raises RateLimitError when the limit is reached, otherwise records
        the attempt.
        """
        result = self.check(identifier, action, limit, window_minutes)
        if not result['allowed']:
            logger.warning('Rate limit hit: %s %s', action, identifier)
            raise RateLimitError(
                'Trop de tentatives. Veuillez réessayer plus tard.',
                reset_at=result['reset_at']
            )
        self.record(identifier, action)

    def cleanup(self, older_than_minutes: Optional[int] = None) -> dict:
        """Deletes attempts older than the cutoff. Returns {'deleted': n}."""
        minutes = older_than_minutes or current_app.config.get('RATE_LIMIT_RETENTION_MINUTES', 120)
        cutoff = datetime.utcnow() - timedelta(minutes=minutes)

        deleted = RateLimitAttempt.query.filter(
            RateLimitAttempt.timestamp < cutoff
        ).delete(synchronize_session=False)
        db.session.commit()

        if deleted:
            logger.info('Rate limit cleanup: %d attempts deleted', deleted)
        return {'deleted': deleted}


# Singleton instance
rate_limiter = RateLimiter()
