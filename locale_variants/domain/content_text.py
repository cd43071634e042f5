"""Mise à plat et reconstruction des arbres de contenu à traduire.

Un contenu est un arbre (dict/list) dont les feuilles texte sont traduites. Les feuilles sont
parcourues en pré-ordre, dans l'ordre d'insertion des clés; les autres feuilles (nombres,
booléens, None) sont conservées telles quelles.
"""

from __future__ import annotations

from typing import Any

SEGMENT_SEPARATOR = "\n---\n"
MANUAL_PLACEHOLDER = "[TRANSLATE: {}]"


def manual_placeholder(node: Any) -> Any:
    """Encapsule chaque feuille texte dans `[TRANSLATE: ...]`, récursivement."""
    if isinstance(node, str):
        return MANUAL_PLACEHOLDER.format(node)
    if isinstance(node, dict):
        return {key: manual_placeholder(value) for key, value in node.items()}
    if isinstance(node, list):
        return [manual_placeholder(value) for value in node]
    return node


def extract_segments(node: Any) -> list[str]:
    """Liste des feuilles texte en pré-ordre."""
    if isinstance(node, str):
        return [node]
    segments: list[str] = []
    if isinstance(node, dict):
        for value in node.values():
            segments.extend(extract_segments(value))
    elif isinstance(node, list):
        for value in node:
            segments.extend(extract_segments(value))
    return segments


def join_segments(segments: list[str]) -> str:
    return SEGMENT_SEPARATOR.join(segments)


def split_segments(text: str) -> list[str]:
    return text.split(SEGMENT_SEPARATOR)


def reinject_segments(node: Any, segments: list[str]) -> Any:
    """Réinjecte les segments traduits dans la forme de `node`, dans le même ordre.

    Un segment manquant ou vide laisse la valeur d'origine en place.
    """
    position = iter(segments)

    def _walk(current: Any) -> Any:
        if isinstance(current, str):
            translated = next(position, None)
            return translated if translated else current
        if isinstance(current, dict):
            return {key: _walk(value) for key, value in current.items()}
        if isinstance(current, list):
            return [_walk(value) for value in current]
        return current

    return _walk(node)
