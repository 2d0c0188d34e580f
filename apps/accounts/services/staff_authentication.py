"""Staff login service."""

import logging

from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError, NotStaffError

User = get_user_model()
logger = logging.getLogger(__name__)


def authenticate_staff(*, email: str, password: str) -> User:
    """
    Check a staff login and stamp ``last_login``.

    Unknown emails and wrong passwords raise the same error so the
    response does not reveal which accounts exist.

    Raises:
        InvalidCredentialsError: If email or password is wrong
        InactiveAccountError: If the account is deactivated
        NotStaffError: If the account has no staff flag
    """
    user = User.objects.filter(email=User.objects.normalize_email(email)).first()

    if user is None or not user.check_password(password):
        logger.warning("Staff login failed for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        logger.warning("Staff login refused for deactivated account %s", user.email)
        raise InactiveAccountError("Account is deactivated")

    if not user.is_staff:
        logger.warning("Staff login refused for non-staff account %s", user.email)
        raise NotStaffError("Account is not a staff account")

    user.last_login = timezone.now()
    User.objects.filter(pk=user.pk).update(last_login=user.last_login)

    logger.info("Staff %s logged in", user.email)
    return user
