from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from portfolio.errors import Conflict, InvalidCredentials, InvalidInput
from portfolio.extensions import db
from portfolio.models import User
from portfolio.utils.request_data import require_fields
from portfolio.utils.transaction import transactional

_dummy_hash: Optional[str] = None


def _compare_against_dummy(password: str) -> None:
    # Unknown emails still cost one hash comparison
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = generate_password_hash("not-a-real-password")
    check_password_hash(_dummy_hash, password)


def verify_credentials(data: Mapping[str, Any]) -> User:
    """
    Checks an email/password pair against the stored hash.

    Raises InvalidCredentials for an unknown email and for a wrong password
    alike; the stored hash is never returned or logged.
    """
    require_fields(data, ("email", "password"))
    email, password = data["email"], data["password"]
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidInput("Email and password must be strings")

    user = User.query.filter_by(email=email.strip().lower()).first()
    if user is None:
        _compare_against_dummy(password)
        raise InvalidCredentials()

    if not user.check_password(password):
        raise InvalidCredentials()

    return user


def create_user(email: str, password: str, name: str = "User", is_admin: bool = False) -> User:
    email = (email or "").strip().lower()
    if not email or not password:
        raise InvalidInput("Email and password are required")

    if User.query.filter_by(email=email).first() is not None:
        raise Conflict("A user with this email already exists")

    with transactional():
        user = User()
        user.email = email
        user.name = name
        user.is_admin = is_admin
        user.set_password(password)
        db.session.add(user)
        db.session.flush()

    return user
