"""
JWT Cookie Utilities

로그인 응답에 access/refresh 토큰을 HttpOnly 쿠키로 심습니다.
브라우저 클라이언트는 쿠키만으로, 그 외 클라이언트는 Bearer 헤더로 인증합니다.
"""

from django.conf import settings
from rest_framework.response import Response


def _cookie_options() -> dict:
    return {
        "httponly": settings.JWT_AUTH_COOKIE_HTTP_ONLY,
        "secure": getattr(settings, "JWT_AUTH_COOKIE_SECURE", not settings.DEBUG),
        "samesite": settings.JWT_AUTH_COOKIE_SAMESITE,
        "path": settings.JWT_AUTH_COOKIE_PATH,
    }


def set_jwt_cookies(
    response: Response, access_token: str, refresh_token: str
) -> Response:
    """응답에 access/refresh 토큰 쿠키를 설정합니다."""
    options = _cookie_options()
    response.set_cookie(
        key=settings.JWT_AUTH_COOKIE,
        value=access_token,
        max_age=int(settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].total_seconds()),
        **options,
    )
    response.set_cookie(
        key=settings.JWT_AUTH_REFRESH_COOKIE,
        value=refresh_token,
        max_age=int(settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"].total_seconds()),
        **options,
    )
    return response


def delete_jwt_cookies(response: Response) -> Response:
    """로그아웃 시 토큰 쿠키를 제거합니다."""
    path = settings.JWT_AUTH_COOKIE_PATH
    samesite = settings.JWT_AUTH_COOKIE_SAMESITE
    response.delete_cookie(settings.JWT_AUTH_COOKIE, path=path, samesite=samesite)
    response.delete_cookie(
        settings.JWT_AUTH_REFRESH_COOKIE, path=path, samesite=samesite
    )
    return response
