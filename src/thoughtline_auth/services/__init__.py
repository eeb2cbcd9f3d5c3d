"""Auth services - JWT and password hashing."""

from thoughtline_auth.services.jwt_service import JWTService
from thoughtline_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
