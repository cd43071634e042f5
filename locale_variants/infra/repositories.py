"""
Repositories pour les groupes et configurations de variantes.

Ce module fournit des implémentations en mémoire (dev/tests) et Redis. Les enregistrements sont
des dicts sérialisables JSON (`model_dump()` des entités); la conversion en modèles est faite
par les services.
"""

import json
from typing import Any

import redis


class InMemoryVariantGroupRepo:
    """
    Dépôt de groupes de variantes en mémoire.

    Stocke les enregistrements dans un dict local (ordre d'insertion conservé), non persistant.
    """

    def __init__(self):
        """Initialise une base mémoire vide."""
        self._db: dict[str, dict[str, Any]] = {}

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Enregistre/écrase un groupe (la position d'insertion est conservée)."""
        self._db[record["id"]] = record
        return record

    def get(self, group_id: str) -> dict[str, Any] | None:
        """Retourne un groupe par id, ou None s'il est absent."""
        return self._db.get(group_id)

    def delete(self, group_id: str) -> bool:
        """Supprime un groupe; renvoie False s'il était absent."""
        return self._db.pop(group_id, None) is not None

    def list_all(self) -> list[dict[str, Any]]:
        """Tous les groupes, dans l'ordre d'insertion."""
        return list(self._db.values())


class RedisVariantGroupRepo:
    """Dépôt de groupes adossé à Redis (clé: `variant_group:{id}`, index ordonné en liste)."""

    def __init__(self, url: str):
        """Crée un client Redis à partir de l'URL fournie."""
        self.client = redis.Redis.from_url(url, decode_responses=True)
        self.idx_key = "variant_group:idx"

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Sérialise en JSON, stocke sous `variant_group:{id}` et indexe les nouveaux ids."""
        key = f"variant_group:{record['id']}"
        is_new = not self.client.exists(key)
        pipe = self.client.pipeline()
        pipe.set(key, json.dumps(record))
        if is_new:
            pipe.rpush(self.idx_key, record["id"])
        pipe.execute()
        return record

    def get(self, group_id: str) -> dict[str, Any] | None:
        """Charge et désérialise le groupe `variant_group:{id}`, si présent."""
        raw = self.client.get(f"variant_group:{group_id}")
        return json.loads(raw) if raw else None

    def delete(self, group_id: str) -> bool:
        """Supprime le groupe et son entrée d'index."""
        pipe = self.client.pipeline()
        pipe.delete(f"variant_group:{group_id}")
        pipe.lrem(self.idx_key, 0, group_id)
        removed, _ = pipe.execute()
        return bool(removed)

    def list_all(self) -> list[dict[str, Any]]:
        """Tous les groupes, dans l'ordre de l'index."""
        records = []
        for group_id in self.client.lrange(self.idx_key, 0, -1):
            record = self.get(group_id)
            if record is not None:
                records.append(record)
        return records


class InMemoryVariantConfigRepo:
    """Dépôt de configurations en mémoire, indexé par (entrée, type de contenu, locale)."""

    def __init__(self):
        """Initialise une base mémoire vide."""
        self._db: dict[tuple[str, str, str], dict[str, Any]] = {}

    @staticmethod
    def _key(record: dict[str, Any]) -> tuple[str, str, str]:
        return (record["entry_uid"], record["content_type_uid"], record["locale"])

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Enregistre/écrase la configuration du triplet."""
        self._db[self._key(record)] = record
        return record

    def get(self, entry_uid: str, content_type_uid: str, locale: str) -> dict[str, Any] | None:
        """Retourne la configuration du triplet, ou None."""
        return self._db.get((entry_uid, content_type_uid, locale))

    def delete(self, entry_uid: str, content_type_uid: str, locale: str) -> bool:
        """Supprime la configuration du triplet; False si absente."""
        return self._db.pop((entry_uid, content_type_uid, locale), None) is not None

    def list_for_entry(self, entry_uid: str, content_type_uid: str) -> list[dict[str, Any]]:
        """Toutes les configurations de l'entrée, toutes locales confondues."""
        return [
            record
            for (entry, content_type, _), record in self._db.items()
            if entry == entry_uid and content_type == content_type_uid
        ]


class RedisVariantConfigRepo:
    """Dépôt de configurations via Redis: un hash par entrée (`variant_config:{entry}:{ct}`)."""

    def __init__(self, url: str):
        """Crée un client Redis à partir de l'URL fournie."""
        self.client = redis.Redis.from_url(url, decode_responses=True)

    @staticmethod
    def _hash_key(entry_uid: str, content_type_uid: str) -> str:
        return f"variant_config:{entry_uid}:{content_type_uid}"

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Stocke la configuration sous le champ `locale` du hash de l'entrée."""
        key = self._hash_key(record["entry_uid"], record["content_type_uid"])
        self.client.hset(key, record["locale"], json.dumps(record))
        return record

    def get(self, entry_uid: str, content_type_uid: str, locale: str) -> dict[str, Any] | None:
        """Charge la configuration du triplet, si présente."""
        raw = self.client.hget(self._hash_key(entry_uid, content_type_uid), locale)
        return json.loads(raw) if raw else None

    def delete(self, entry_uid: str, content_type_uid: str, locale: str) -> bool:
        """Supprime le champ `locale` du hash de l'entrée."""
        return bool(self.client.hdel(self._hash_key(entry_uid, content_type_uid), locale))

    def list_for_entry(self, entry_uid: str, content_type_uid: str) -> list[dict[str, Any]]:
        """Toutes les configurations de l'entrée."""
        raw = self.client.hgetall(self._hash_key(entry_uid, content_type_uid)) or {}
        return [json.loads(value) for value in raw.values()]
