"""
Endpoint de santé pour vérifier la disponibilité de l'API et du stockage.

Expose `/health` pour signaler l'état général de l'application et du backend de stockage.
"""

from fastapi import APIRouter

from locale_variants.api.deps import container_dep
from locale_variants.core.container import Container

router = APIRouter(tags=["health"])


@router.get("/health")
def health(container: Container = container_dep):
    """Vérifie la disponibilité de l'API et le backend de stockage."""
    return {
        "status": "ok",
        "storage": container.storage_backend,
        "redis_url": bool(container.settings.REDIS_URL),
    }
