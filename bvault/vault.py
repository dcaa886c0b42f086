# --------------------------------------------------------------
# File: vault.py
# Description: Lectura de sobres cifrados persistidos, protegidos por una contraseña.
# --------------------------------------------------------------
"""Baúl local de valores cifrados indexados por clave.

El baúl solo almacena sobres ya cifrados por el cifrador compañero y los
descifra al leerlos. Un registro que no se puede descifrar se elimina.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from bvault import config
from bvault.decryptor import decrypt_payload
from bvault.errors import BVaultError
from bvault.models import EncryptedPayload
from bvault.storage import load_db, save_db

logger = logging.getLogger(__name__)

VAULT_PATH = os.path.join(config.STORAGE_PATH, "vault.json")


class SecureVault:
    """Acceso por clave a los sobres del baúl con una única contraseña.

    Args:
        password (str): Contraseña con la que se cifraron los sobres.
        path (Optional[str]): Ruta del archivo JSON; por defecto `VAULT_PATH`.

    Raises:
        ValueError: Si la contraseña está vacía.

    """

    def __init__(self, password: str, path: Optional[str] = None) -> None:
        if not password:
            raise ValueError("Invalid encryption password")
        self._password = password
        self.path = path or VAULT_PATH

    def put_envelope(self, key: str, payload: EncryptedPayload) -> None:
        """Guarda un sobre ya cifrado bajo `key`, reemplazando el anterior."""

        db = load_db(self.path)
        db["items"][key] = payload.model_dump(by_alias=True)
        save_db(db, self.path)

    def get_item(self, key: str) -> Optional[str]:
        """Descifra el valor guardado bajo `key`.

        Args:
            key (str): Clave del registro.

        Returns:
            Optional[str]: Texto descifrado, o `None` si no existe o no se pudo descifrar.

        """
        record = load_db(self.path)["items"].get(key)
        if record is None:
            return None

        try:
            payload = EncryptedPayload.model_validate(record)
            return decrypt_payload(payload, self._password)
        except BVaultError as exc:
            logger.error("Descifrado fallido para la clave %r: %s", key, exc.kind.value)
        except ValueError:
            logger.error("Registro malformado para la clave %r", key)

        self.remove_item(key)
        return None

    def remove_item(self, key: str) -> None:
        """Elimina `key` del baúl si existe."""

        db = load_db(self.path)
        if db["items"].pop(key, None) is not None:
            save_db(db, self.path)

    def clear(self) -> None:
        """Vacía todos los registros del baúl."""

        db = load_db(self.path)
        db["items"] = {}
        save_db(db, self.path)

    def keys(self) -> List[str]:
        """Devuelve las claves almacenadas ordenadas alfabéticamente."""

        return sorted(load_db(self.path)["items"])

    def __contains__(self, key: object) -> bool:
        return key in load_db(self.path)["items"]
