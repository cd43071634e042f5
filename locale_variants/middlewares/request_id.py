"""Middleware Starlette pour ajouter et propager un identifiant de requête.

L'identifiant (reçu dans X-Request-ID ou généré) est exposé dans `request.state.trace_id`, repris
par les enveloppes d'erreur, et renvoyé dans l'en-tête de réponse.
"""

from collections.abc import Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware pour ajouter et propager un identifiant de requête."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        """Initialise le middleware avec le nom d'en-tête spécifié.

        Args:
            app: Application ASGI à wrapper.
            header_name: Nom de l'en-tête HTTP pour l'ID de requête.
        """
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next: Callable):
        """Attache l'identifiant à la requête puis à la réponse."""
        request_id = request.headers.get(self.header_name) or str(uuid4())
        request.state.trace_id = request_id
        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
