"""
Script de serveur de développement.

Lance l'API avec uvicorn. Sans clé API, les fournisseurs de traduction renvoient des traductions
factices, ce qui permet un usage local sans dépendances externes.
"""

import os

import uvicorn

from locale_variants.app.main import app


def main():
    """Point d'entrée: sert l'application sur `HOST`/`PORT` (0.0.0.0:8000 par défaut)."""
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
