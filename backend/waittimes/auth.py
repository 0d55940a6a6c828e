"""Admin gate — an authorization check the admin routes depend on.

Only a shared-secret implementation exists. Routes depend on
``get_authorizer`` rather than the secret, so a real credential scheme
can replace it via ``app.dependency_overrides`` or by changing that
function, without touching moderation code.
"""
import hmac
import logging
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from waittimes.config import settings

logger = logging.getLogger(__name__)


class AdminAuthorizer(ABC):
    """Decides whether a presented credential grants admin access."""

    @abstractmethod
    def is_authorized(self, credential: Optional[str]) -> bool:
        ...


class SharedSecretAuthorizer(AdminAuthorizer):
    """Compares the credential to one configured password."""

    def __init__(self, secret: str):
        self._secret = secret

    def is_authorized(self, credential: Optional[str]) -> bool:
        if not self._secret or credential is None:
            return False
        return hmac.compare_digest(credential.encode(), self._secret.encode())


def get_authorizer() -> AdminAuthorizer:
    return SharedSecretAuthorizer(settings.ADMIN_PASSWORD)


def require_admin(
    x_admin_password: Optional[str] = Header(None),
    authorizer: AdminAuthorizer = Depends(get_authorizer),
) -> None:
    """FastAPI dependency — 401 unless the request carries admin credentials."""
    if not authorizer.is_authorized(x_admin_password):
        logger.warning("Rejected admin request with invalid credentials")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin password")
