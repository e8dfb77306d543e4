# ============================================
# accounts/authentication.py
# ============================================
from django.contrib.auth import SESSION_KEY
from rest_framework import exceptions
from rest_framework.authentication import SessionAuthentication


class SessionIdentityAuthentication(SessionAuthentication):
    """
    Cookie session authentication that answers 401 instead of 403 when no
    session is present, and 404 when the session points at a user row that
    no longer exists.
    """

    www_authenticate_realm = "session"

    def authenticate(self, request):
        result = super().authenticate(request)
        if result is None and SESSION_KEY in request._request.session:
            raise exceptions.NotFound("User not found")
        return result

    def authenticate_header(self, request):
        # A non-empty header makes DRF keep 401 for NotAuthenticated
        return f'Session realm="{self.www_authenticate_realm}"'
