# --------------------------------------------------------------
# File: converters.py
# Description: Conversión estricta entre Base64 estándar, bytes y texto UTF-8.
# --------------------------------------------------------------
"""Utilidades de codificación usadas en la entrada y la salida del pipeline."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Tuple

from bvault.errors import InvalidEncodingError, InvalidUTF8Error

logger = logging.getLogger(__name__)


def b64_to_bytes(value: str, *, field: str = "value") -> bytes:
    """Decodifica Base64 estándar (RFC 4648) exigiendo alfabeto y relleno correctos.

    Args:
        value (str): Texto codificado en Base64 con relleno.
        field (str): Nombre del campo, usado solo en el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        InvalidEncodingError: Si hay caracteres fuera del alfabeto o el relleno es incorrecto.

    """
    if not isinstance(value, str):
        raise InvalidEncodingError(f"{field}: expected base64 text")
    try:
        # validate=True rechaza espacios y el alfabeto URL-safe.
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("Base64 inválido en el campo %s", field)
        raise InvalidEncodingError(f"{field}: invalid base64") from None


def bytes_to_b64(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def bytes_to_text(data: bytes) -> str:
    """Valida y decodifica bytes como UTF-8 estricto.

    Raises:
        InvalidUTF8Error: Si la secuencia no es UTF-8 válida.

    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidUTF8Error() from None


def decode_inputs(
    ciphertext_b64: str, iv_b64: str, salt_b64: str
) -> Tuple[bytes, bytes, bytes]:
    """Decodifica las tres entradas binarias; falla con la primera inválida.

    Args:
        ciphertext_b64 (str): Ciphertext en Base64.
        iv_b64 (str): IV en Base64.
        salt_b64 (str): Salt en Base64.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext, IV y salt decodificados.

    """
    ciphertext = b64_to_bytes(ciphertext_b64, field="ciphertext")
    iv = b64_to_bytes(iv_b64, field="iv")
    salt = b64_to_bytes(salt_b64, field="salt")
    return ciphertext, iv, salt
