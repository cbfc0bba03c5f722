"""
JWT authentication that also reads the token from the HTTP-only cookie.

The browser client relies on the `token` cookie set at login, other API
clients send the usual `Authorization: Bearer <token>` header.
"""

import logging
from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class CookieJWTAuthentication(JWTAuthentication):
    """Bearer header first, auth cookie as fallback."""

    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            return super().authenticate(request)

        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
        except InvalidToken:
            # Stale cookie: treat the request as anonymous
            logger.debug("Ignoring invalid auth cookie")
            return None

        return self.get_user(validated_token), validated_token


def set_auth_cookie(response, token):
    """Attach the access token to the response as an HTTP-only cookie."""
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )
    return response


def clear_auth_cookie(response):
    """Expire the auth cookie."""
    response.delete_cookie(
        settings.AUTH_COOKIE_NAME,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )
    return response
