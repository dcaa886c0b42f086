# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del descifrado por contraseña del paquete bvault.
# --------------------------------------------------------------
"""Inicializa el paquete `bvault` y reexporta su operación de descifrado."""

import logging

from bvault.decryptor import decrypt, decrypt_payload, decrypt_sync, try_decrypt
from bvault.errors import (
    BVaultError,
    DecryptionError,
    ErrorKind,
    InvalidEncodingError,
    InvalidIVLengthError,
    InvalidKeyLengthError,
    InvalidUTF8Error,
)
from bvault.models import DecryptResult, EncryptedPayload

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BVaultError",
    "DecryptResult",
    "DecryptionError",
    "EncryptedPayload",
    "ErrorKind",
    "InvalidEncodingError",
    "InvalidIVLengthError",
    "InvalidKeyLengthError",
    "InvalidUTF8Error",
    "decrypt",
    "decrypt_payload",
    "decrypt_sync",
    "try_decrypt",
]
