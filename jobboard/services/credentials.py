# jobboard/services/credentials.py
import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from jobboard.db.database import storage_errors
from jobboard.db.models import User, ROLES
from jobboard.errors import InvalidInput, Conflict, AuthError, NotFound, StorageError
from jobboard.utils import (
    hash_password, verify_password, validate_user_email, split_skills, utcnow, DUMMY_HASH
)

log = logging.getLogger(__name__)


class CredentialStore:
    """ Persists user accounts and checks their credentials. """

    def __init__(self, session_factory: sessionmaker, clock: Callable = utcnow):
        self.session_factory = session_factory
        self.clock = clock

    def register(self, email, password, name, role, district=None, phone=None, skills=None,
                 education=None, experience=None) -> User:
        missing = [label for label, value in
                   (("email", email), ("password", password), ("name", name), ("role", role))
                   if not value or not str(value).strip()]
        if missing:
            raise InvalidInput(f"Email, password, name, and role are required (missing: {', '.join(missing)}).")
        if role not in ROLES:
            log.warning(f"Registration rejected: invalid role {role!r}")
            raise InvalidInput(f"Invalid role specified. Must be one of: {', '.join(ROLES)}.")
        try:
            normalized_email = validate_user_email(email.strip())
        except ValueError as ve:
            log.warning(f"Registration rejected: {ve}")
            raise InvalidInput(str(ve))

        user = User(
            email=normalized_email,
            password_hash=hash_password(password),
            name=name.strip(),
            role=role,
            district=district,
            phone=phone,
            skills=",".join(split_skills(skills)),
            education=education,
            experience=experience,
            created_at=self.clock(),
        )
        with self.session_factory() as session, storage_errors("registering a user"):
            session.add(user)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                # The unique constraint decides the winner; confirm it was the email that clashed
                if session.query(User.id).filter(User.email == normalized_email).first():
                    log.warning(f"Registration failed: Email {normalized_email} already exists.")
                    raise Conflict("User already exists with this email")
                log.error(f"Database integrity error adding user {normalized_email}: {e}", exc_info=True)
                raise StorageError("Could not create user due to a data conflict.") from e
        log.info(f"User created successfully: ID={user.id}, Role={user.role}")
        return user

    def verify_credentials(self, email, password) -> User:
        """Returns the matching user or raises the same AuthError for every kind of failure."""
        if not email or not password:
            raise AuthError()
        try:
            normalized_email = validate_user_email(email.strip())
        except ValueError:
            normalized_email = email.strip()

        with self.session_factory() as session, storage_errors("looking up credentials"):
            user = session.query(User).filter(User.email == normalized_email).first()

        if user is None:
            verify_password(DUMMY_HASH, password)
            log.warning("Login failed: unknown email.")
            raise AuthError()
        if not verify_password(user.password_hash, password):
            log.warning(f"Login failed: wrong password for user ID {user.id}.")
            raise AuthError()
        log.info(f"Credentials verified for user ID {user.id}")
        return user

    def get_user(self, user_id: int) -> User:
        with self.session_factory() as session, storage_errors("loading a user"):
            user = session.get(User, user_id)
        if user is None:
            raise NotFound("User not found.")
        return user
