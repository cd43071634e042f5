"""
Tests pour le registre des groupes de variantes.

Ce module teste la création (validation des locales), la lecture, la mise à jour partielle, la
suppression et l'ordre de listage des groupes.
"""

from __future__ import annotations

import pytest

from locale_variants.domain.entities import VariantGroupCreate
from locale_variants.domain.errors import NotFound, ValidationError

# Constantes pour éviter les erreurs PLR2004 (Magic values)
EXPECTED_COUNT_2 = 2
EXPECTED_COUNT_3 = 3


def test_create_assigns_id_and_timestamps(groups, indic_group_payload) -> None:
    """Teste l'attribution de l'id et des horodatages à la création."""
    group = groups.create(indic_group_payload)

    assert group.id.startswith("variant_")
    assert group.created_at == group.updated_at
    assert [loc.code for loc in group.locales] == ["en", "hi", "mr"]
    assert group.find_locale("mr").fallback == ["hi", "en"]
    assert group.find_locale("en").is_default is True


def test_create_accepts_model_input(groups) -> None:
    """Teste la création à partir d'un modèle `VariantGroupCreate`."""
    draft = VariantGroupCreate(name="Solo", locales=[{"code": "en", "name": "English"}])
    group = groups.create(draft)
    assert groups.get(group.id) == group


def test_create_rejects_empty_locales(groups) -> None:
    """Teste le refus d'un groupe sans locale."""
    with pytest.raises(ValidationError):
        groups.create({"name": "Empty", "locales": []})


def test_create_rejects_duplicate_codes(groups) -> None:
    """Teste le refus de codes de locale dupliqués."""
    payload = {
        "name": "Dup",
        "locales": [
            {"code": "en", "name": "English"},
            {"code": "en", "name": "English again"},
        ],
    }
    with pytest.raises(ValidationError) as exc_info:
        groups.create(payload)
    assert exc_info.value.details == {"duplicates": ["en"]}


def test_create_wraps_malformed_payload(groups) -> None:
    """Teste qu'un payload mal formé lève l'erreur métier de validation."""
    with pytest.raises(ValidationError) as exc_info:
        groups.create({"locales": [{"code": "en", "name": "English"}]})
    assert "errors" in exc_info.value.details


def test_ids_are_unique(groups, indic_group_payload) -> None:
    """Teste l'unicité des identifiants entre créations successives."""
    ids = {groups.create(indic_group_payload).id for _ in range(EXPECTED_COUNT_3)}
    assert len(ids) == EXPECTED_COUNT_3


def test_get_unknown_raises_not_found(groups) -> None:
    """Teste la lecture d'un groupe inconnu."""
    with pytest.raises(NotFound):
        groups.get("variant_missing")


def test_update_merges_and_refreshes_updated_at(groups, indic_group_payload) -> None:
    """Teste la fusion partielle et le rafraîchissement de `updated_at`."""
    group = groups.create(indic_group_payload)

    updated = groups.update(group.id, {"description": "Renamed"})

    assert updated.description == "Renamed"
    assert updated.name == group.name
    assert updated.locales == group.locales
    assert updated.created_at == group.created_at
    assert updated.updated_at > group.updated_at
    assert groups.get(group.id) == updated


def test_update_without_changes_still_bumps_updated_at(groups, indic_group_payload) -> None:
    """Teste qu'une mise à jour vide rafraîchit quand même `updated_at`."""
    group = groups.create(indic_group_payload)
    updated = groups.update(group.id, {})
    assert updated.updated_at != group.updated_at


def test_update_ignores_managed_fields(groups, indic_group_payload) -> None:
    """Teste que `id` et `createdAt` fournis sont ignorés."""
    group = groups.create(indic_group_payload)

    updated = groups.update(group.id, {"id": "other", "createdAt": "1970-01-01", "name": "New"})

    assert updated.id == group.id
    assert updated.created_at == group.created_at
    assert updated.name == "New"


def test_update_validates_new_locales(groups, indic_group_payload) -> None:
    """Teste la validation des locales remplacées."""
    group = groups.create(indic_group_payload)
    with pytest.raises(ValidationError):
        groups.update(group.id, {"locales": []})


def test_update_unknown_raises_not_found(groups) -> None:
    """Teste la mise à jour d'un groupe inconnu."""
    with pytest.raises(NotFound):
        groups.update("variant_missing", {"name": "x"})


def test_delete_then_get_raises(groups, indic_group_payload) -> None:
    """Teste la suppression puis la lecture d'un groupe."""
    group = groups.create(indic_group_payload)
    groups.delete(group.id)
    with pytest.raises(NotFound):
        groups.get(group.id)
    with pytest.raises(NotFound):
        groups.delete(group.id)


def test_list_preserves_insertion_order(groups, indic_group_payload) -> None:
    """Teste l'ordre d'insertion du listage, y compris après mise à jour."""
    first = groups.create({**indic_group_payload, "name": "First"})
    second = groups.create({**indic_group_payload, "name": "Second"})
    groups.update(first.id, {"name": "First (edited)"})

    names = [g.name for g in groups.list()]

    assert len(names) == EXPECTED_COUNT_2
    assert names == ["First (edited)", "Second"]
    assert groups.list()[1].id == second.id
