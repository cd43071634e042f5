"""
Métriques Prometheus pour l'application.

Ce module définit les métriques Prometheus utilisées pour le monitoring du service de
variantes: requêtes HTTP, résolutions de fallback et traductions.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter()

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Fallback resolution
FALLBACK_RESOLUTIONS = Counter(
    "fallback_resolutions_total",
    "Total fallback resolutions",
    ["outcome"],  # exact | fallback | empty
)
FALLBACK_CONFIDENCE = Histogram(
    "fallback_confidence",
    "Confidence of resolved fallback content",
    buckets=[x / 10.0 for x in range(0, 11)],  # 0.0..1.0 step 0.1
)

# Variant configurations
VARIANT_CONFIGS_CREATED = Counter(
    "variant_configs_created_total",
    "Variant configurations created",
    ["source"],  # single | bulk
)

# Translation
TRANSLATION_REQUESTS = Counter(
    "translation_requests_total",
    "Total translation requests",
    ["method", "provider"],
)
TRANSLATION_ERRORS = Counter(
    "translation_errors_total",
    "Total translation failures",
    ["provider"],
)
TRANSLATION_LATENCY = Histogram(
    "translation_latency_seconds",
    "Latency of translation requests",
    ["method", "provider"],
)


def route_label(request: Request) -> str:
    """Retourne le gabarit de la route appariée, jamais le chemin brut.

    Exemple: `/variants/groups/{group_id}`. Requête non appariée -> "unknown".
    """
    return getattr(request.scope.get("route"), "path", "unknown")


@metrics_router.get("/metrics")
def metrics():
    """
    Expose les métriques Prometheus au format texte.

    Returns:
        Response: Réponse HTTP contenant les métriques au format Prometheus.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware Prometheus pour mesurer les métriques HTTP.

    Collecte les métriques de comptage des requêtes et de latence par route pour l'exposition
    Prometheus.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Traite une requête HTTP et collecte les métriques.

        Args:
            request: Requête HTTP entrante.
            call_next: Fonction pour appeler le middleware suivant.

        Returns:
            Response: Réponse HTTP avec métriques collectées.
        """
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = route_label(request)
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - start)
        return response
