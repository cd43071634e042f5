"""
Application principale FastAPI.

Ce module assemble tous les composants de l'application : middlewares, routes, métriques et
gestion des erreurs du service de variantes de locales.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Attacher le conteneur de dépendances (`app.state.container`)
- Ajouter les middlewares (request id, timing, métriques)
- Monter les routers (santé, variantes, traductions, métriques)
"""

from __future__ import annotations

from fastapi import FastAPI

from locale_variants.api.routes_health import router as health_router
from locale_variants.api.routes_translations import router as translations_router
from locale_variants.api.routes_variants import router as variants_router
from locale_variants.apigw.errors import register_error_handlers
from locale_variants.app.metrics import PrometheusMiddleware, metrics_router
from locale_variants.core.container import Container, get_container
from locale_variants.core.logging import setup_logging
from locale_variants.middlewares.request_id import RequestIDMiddleware
from locale_variants.middlewares.timing import TimingMiddleware


def create_app(container: Container | None = None) -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Utilise le conteneur fourni, sinon le conteneur partagé du processus
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes et les handlers d'erreurs
    """
    setup_logging()
    container = container or get_container()
    settings = container.settings
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.state.container = container
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(variants_router)
    app.include_router(translations_router)
    app.include_router(metrics_router)
    return app


app = create_app()
