# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar almacenamiento y cifrar datos de referencia.
# --------------------------------------------------------------

import importlib
import os
from typing import Callable, Dict, Iterator

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from bvault.converters import bytes_to_b64
from bvault.crypto_kdf import derive_key


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH y recarga bvault.config y bvault.vault para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))

    import bvault.config as config_module
    import bvault.vault as vault_module

    importlib.reload(config_module)
    importlib.reload(vault_module)

    yield
    # tmp_path se limpia automáticamente por pytest


def _reference_encrypt(plaintext: str, password: str) -> Dict[str, str]:
    """Cifra como lo haría el cifrador compañero (solo para pruebas).

    Args:
        plaintext (str): Texto a cifrar.
        password (str): Contraseña de la que se deriva la clave.

    Returns:
        Dict[str, str]: Sobre con `encryptedData`, `iv` y `salt` en Base64.
    """
    salt = os.urandom(16)
    iv = os.urandom(16)
    key = derive_key(password, salt)

    padder = padding.PKCS7(128).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return {
        "encryptedData": bytes_to_b64(ciphertext),
        "iv": bytes_to_b64(iv),
        "salt": bytes_to_b64(salt),
    }


@pytest.fixture
def reference_encrypt() -> Callable[[str, str], Dict[str, str]]:
    """Expone el cifrado de referencia a las pruebas.

    Returns:
        Callable[[str, str], Dict[str, str]]: Función `(plaintext, password) -> sobre`.
    """
    return _reference_encrypt
