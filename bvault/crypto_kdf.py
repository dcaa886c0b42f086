# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES-256 mediante PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------
"""Derivación determinista de la clave simétrica a partir de la contraseña."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

# Fijos: cambiarlos rompe la compatibilidad con los datos ya cifrados.
PBKDF2_ITERATIONS = 100_000
KEY_LENGTH = 32


def derive_key(password: str, salt: bytes) -> bytes:
    """Deriva la clave de 256 bits con PBKDF2-HMAC-SHA256.

    Args:
        password (str): Contraseña del usuario; se usan sus bytes UTF-8.
        salt (bytes): Salt asociada al ciphertext, de cualquier longitud.

    Returns:
        bytes: Clave de `KEY_LENGTH` bytes, idéntica para idénticas entradas.

    """

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(password.encode("utf-8"))
