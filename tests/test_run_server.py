"""Tests pour le script de lancement du serveur de développement."""

from __future__ import annotations

from locale_variants.app.main import app
from locale_variants.scripts import run_server

TEST_PORT = 9001


def test_main_runs_uvicorn_with_env_port(monkeypatch) -> None:
    """Teste que le script sert l'application sur le port de l'environnement."""
    calls = []
    monkeypatch.setattr(run_server.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.setenv("PORT", str(TEST_PORT))
    monkeypatch.delenv("HOST", raising=False)

    run_server.main()

    (args, kwargs), = calls
    assert args == (app,)
    assert kwargs == {"host": "0.0.0.0", "port": TEST_PORT, "reload": False}
