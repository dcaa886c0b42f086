# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia JSON de los sobres cifrados del baúl.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para el almacenamiento local."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

__all__ = ["VAULT_VERSION", "empty_db", "load_db", "save_db"]

VAULT_VERSION = 1

logger = logging.getLogger(__name__)


def empty_db() -> Dict[str, Any]:
    """Devuelve una base vacía nueva con la versión actual del formato."""

    return {"version": VAULT_VERSION, "items": {}}


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def load_db(path: str) -> Dict[str, Any]:
    """Carga el archivo JSON del baúl.

    Args:
        path (str): Ruta del archivo JSON.

    Returns:
        Dict[str, Any]: Estructura cargada o una base vacía si no es accesible.

    """

    try:
        with open(path, "r", encoding="utf-8") as handler:
            db = json.load(handler)
    except FileNotFoundError:
        return empty_db()
    except json.JSONDecodeError:
        logger.warning("Baúl corrupto en %s; se usa una base vacía", path)
        return empty_db()
    if not isinstance(db, dict) or not isinstance(db.get("items"), dict):
        logger.warning("Formato de baúl desconocido en %s; se usa una base vacía", path)
        return empty_db()
    return db


def save_db(db: Dict[str, Any], path: str) -> None:
    """Guarda la base de datos JSON aplicando escritura atómica."""

    _ensure_parent_dir(path)
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as handler:
        json.dump(db, handler, indent=2, ensure_ascii=False)
    os.replace(tmp_path, path)
