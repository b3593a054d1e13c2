"""Auth middleware - resolves the authenticated principal for a request."""

from dataclasses import dataclass

import falcon.asgi

from bintrack.domain.exceptions import Unauthenticated


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates bearer tokens and sets req.context.user.

    req.context.user is None for unauthenticated requests. With
    trust_user_header (development without Keycloak) the X-User-Id header is
    taken as the principal id.
    """

    def __init__(self, keycloak_provider=None, trust_user_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_user_header = trust_user_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._keycloak:
            principal = self._keycloak.decode_token(auth[7:])
            if principal:
                req.context.user = RequestUser(
                    user_id=principal.user_id,
                    email=principal.email,
                    username=principal.username,
                )
            return
        if self._trust_user_header:
            user_id = (req.get_header("X-User-Id") or "").strip()
            if user_id:
                req.context.user = RequestUser(user_id=user_id)


def require_user(req: falcon.asgi.Request) -> RequestUser:
    """Return the authenticated user or raise Unauthenticated."""
    user = getattr(req.context, "user", None)
    if not user:
        raise Unauthenticated("Authentication required")
    return user
