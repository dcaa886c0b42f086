# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía cerrada de errores del descifrado por contraseña.
# --------------------------------------------------------------
"""Errores tipados que clasifican cada fallo del pipeline de descifrado."""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = [
    "ErrorKind",
    "BVaultError",
    "InvalidEncodingError",
    "InvalidIVLengthError",
    "InvalidKeyLengthError",
    "DecryptionError",
    "InvalidUTF8Error",
]


class ErrorKind(str, Enum):
    """Las cinco clases de fallo posibles del descifrado."""

    INVALID_ENCODING = "InvalidEncoding"
    INVALID_IV_LENGTH = "InvalidIVLength"
    INVALID_KEY_LENGTH = "InvalidKeyLength"
    DECRYPTION_ERROR = "DecryptionError"
    INVALID_UTF8 = "InvalidUTF8"


class BVaultError(Exception):
    """Error base del paquete; siempre lleva un `ErrorKind`.

    Attributes:
        kind (ErrorKind): Clase del fallo, sobre la que deben decidir los llamadores.
        detail (Optional[str]): Texto legible opcional. Nunca contiene claro ni claves.

    """

    kind: ErrorKind
    default_message = "Decryption failed"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(detail or self.default_message)


class InvalidEncodingError(BVaultError):
    """Alguna de las entradas no es Base64 estándar con relleno."""

    kind = ErrorKind.INVALID_ENCODING
    default_message = "invalid base64"


class InvalidIVLengthError(BVaultError):
    """El IV decodificado no mide 16 bytes."""

    kind = ErrorKind.INVALID_IV_LENGTH
    default_message = "IV must be 16 bytes"


class InvalidKeyLengthError(BVaultError):
    """La clave no mide 32 bytes (no debería ocurrir con `derive_key`)."""

    kind = ErrorKind.INVALID_KEY_LENGTH
    default_message = "invalid key length"


class DecryptionError(BVaultError):
    """Fallo del modo CBC o del relleno PKCS#7.

    El esquema no autentica el ciphertext, así que este error no distingue
    entre contraseña incorrecta, ciphertext corrupto o datos manipulados.
    """

    kind = ErrorKind.DECRYPTION_ERROR
    default_message = "decryption / padding error"


class InvalidUTF8Error(BVaultError):
    """El claro sin relleno no es UTF-8 válido."""

    kind = ErrorKind.INVALID_UTF8
    default_message = "invalid utf-8"
