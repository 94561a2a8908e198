"""
JWT utilities - validation of identity provider tokens.

Tokens are issued by the external identity provider. Two setups:
- HS256 with a shared JWT_SECRET_KEY
- RS256 (or other RS*/ES*) with the provider's JWT_PUBLIC_KEY,
  optionally checking JWT_ISSUER and JWT_AUDIENCE

`sub` is the identity subject, `email` the user's email.

create_access_token() issues HS256 tokens locally for development and
tests only.
"""

import jwt
import uuid
from datetime import datetime
from typing import Optional, Tuple
from flask import current_app


class TokenType:
    """Token types; provider tokens carry none and count as access."""
    ACCESS = 'access'
    REFRESH = 'refresh'


def _verification_key() -> str:
    algorithm = current_app.config.get('JWT_ALGORITHM', 'HS256')
    if algorithm.startswith('HS'):
        return current_app.config['JWT_SECRET_KEY']
    return current_app.config['JWT_PUBLIC_KEY']


def create_access_token(subject: str, email: str, **claims) -> str:
    """
    Issues a local HS256 access token.

    Args:
        subject: identity subject (becomes `sub`)
        email: user email
        claims: extra claims merged into the payload

    Returns:
        Encoded JWT string
    """
    now = datetime.utcnow()
    payload = {
        'sub': subject,
        'email': email,
        'jti': str(uuid.uuid4()),
        'type': TokenType.ACCESS,
        'iat': now,
        'exp': now + current_app.config['JWT_ACCESS_TOKEN_EXPIRES'],
    }
    issuer = current_app.config.get('JWT_ISSUER')
    audience = current_app.config.get('JWT_AUDIENCE')
    if issuer:
        payload['iss'] = issuer
    if audience:
        payload['aud'] = audience
    payload.update(claims)

    return jwt.encode(
        payload,
        current_app.config['JWT_SECRET_KEY'],
        algorithm='HS256'
    )


def decode_token(token: str) -> Tuple[Optional[dict], Optional[str]]:
    """
    Decodes and validates a JWT.

    Returns:
        (payload, None) on success, (None, error message) otherwise
    """
    options = {'require': ['exp', 'sub']}
    kwargs = {}
    issuer = current_app.config.get('JWT_ISSUER')
    audience = current_app.config.get('JWT_AUDIENCE')
    if issuer:
        kwargs['issuer'] = issuer
    if audience:
        kwargs['audience'] = audience
    else:
        options['verify_aud'] = False

    try:
        payload = jwt.decode(
            token,
            _verification_key(),
            algorithms=[current_app.config.get('JWT_ALGORITHM', 'HS256')],
            options=options,
            **kwargs
        )
        return payload, None

    except jwt.ExpiredSignatureError:
        return None, 'Token expiré'

    except jwt.InvalidTokenError as e:
        return None, f'Token invalide: {str(e)}'


def extract_token_from_header(auth_header: str) -> Optional[str]:
    """
    Extracts the token from an Authorization header ("Bearer <token>").

    Returns:
        Token string or None when the format is wrong
    """
    if not auth_header:
        return None

    parts = auth_header.split()

    if len(parts) != 2:
        return None

    if parts[0].lower() != 'bearer':
        return None

    return parts[1]
