# jobboard/services/sessions.py
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from jobboard.db.models import ROLES
from jobboard.errors import InvalidToken

log = logging.getLogger(__name__)

TOKEN_LIFETIME = timedelta(hours=24)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Claims:
    user_id: int
    email: str
    role: str
    expires_at: datetime


class SessionIssuer:
    """
    Issues and verifies signed identity tokens.

    Tokens are HMAC-signed JWTs valid for TOKEN_LIFETIME. Changing the signing key
    invalidates every outstanding token; there is no revocation or refresh.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", clock: Callable[[], datetime] = _now):
        if not secret_key:
            raise ValueError("A signing key is required.")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.clock = clock

    def issue(self, user_id: int, email: str, role: str) -> str:
        issued_at = self.clock()
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + TOKEN_LIFETIME,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        log.debug(f"Token issued for user ID {user_id}")
        return token

    def verify(self, token: str | None) -> Claims:
        if not token:
            raise InvalidToken("Access token required")
        try:
            payload = jwt.decode(
                token, self._secret_key, algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            log.warning("Token rejected: Token has expired.")
            raise InvalidToken("Token has expired.")
        except jwt.InvalidTokenError as e:
            log.warning(f"Token rejected: Invalid JWT token - {e}")
            raise InvalidToken()

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise InvalidToken("Invalid token payload.")
        role = payload.get("role")
        if role not in ROLES:
            raise InvalidToken("Invalid token payload.")
        return Claims(
            user_id=user_id,
            email=payload.get("email", ""),
            role=role,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
