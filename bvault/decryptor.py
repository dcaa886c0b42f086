# --------------------------------------------------------------
# File: decryptor.py
# Description: Operación pública de descifrado por contraseña (PBKDF2 + AES-256-CBC).
# --------------------------------------------------------------
"""Pipeline Decodificar → Derivar → Descifrar → Quitar relleno → Validar UTF-8.

Cada etapa valida sus propias precondiciones y falla con el `BVaultError`
más específico; no hay reintentos ni resultados parciales. El esquema no
incluye HMAC ni AEAD, de modo que un `DecryptionError` puede deberse a una
contraseña incorrecta, a un ciphertext corrupto o a datos manipulados.
"""

import logging

from bvault.converters import bytes_to_text, decode_inputs
from bvault.crypto_kdf import derive_key
from bvault.crypto_sym import aes_cbc_decrypt_padded
from bvault.errors import BVaultError
from bvault.models import DecryptResult, EncryptedPayload

logger = logging.getLogger(__name__)

__all__ = ["decrypt", "decrypt_sync", "decrypt_payload", "try_decrypt"]


def decrypt(ciphertext_b64: str, password: str, iv_b64: str, salt_b64: str) -> str:
    """Descifra un ciphertext Base64 con la contraseña, el IV y la salt dados.

    Args:
        ciphertext_b64 (str): Ciphertext AES-256-CBC en Base64 estándar.
        password (str): Contraseña en claro.
        iv_b64 (str): IV de 16 bytes en Base64 estándar.
        salt_b64 (str): Salt de PBKDF2 en Base64 estándar.

    Returns:
        str: Texto original.

    Raises:
        InvalidEncodingError: Si alguna entrada no es Base64 válido.
        InvalidIVLengthError: Si el IV no mide 16 bytes.
        InvalidKeyLengthError: Si la clave derivada no mide 32 bytes.
        DecryptionError: Si el ciphertext está desalineado o el relleno es inválido.
        InvalidUTF8Error: Si el claro no es UTF-8 válido.

    """
    try:
        ciphertext, iv, salt = decode_inputs(ciphertext_b64, iv_b64, salt_b64)
        key = derive_key(password, salt)
        plaintext_bytes = aes_cbc_decrypt_padded(key, iv, ciphertext)
        return bytes_to_text(plaintext_bytes)
    except BVaultError as exc:
        logger.info("Descifrado fallido: %s", exc.kind.value)
        raise


# Alias por compatibilidad con los llamadores de `decrypt_sync`.
decrypt_sync = decrypt


def decrypt_payload(payload: EncryptedPayload, password: str) -> str:
    """Descifra un `EncryptedPayload` completo con la contraseña indicada."""

    return decrypt(payload.encrypted_data, password, payload.iv, payload.salt)


def try_decrypt(
    ciphertext_b64: str, password: str, iv_b64: str, salt_b64: str
) -> DecryptResult:
    """Ejecuta `decrypt` devolviendo un `DecryptResult` en lugar de lanzar.

    Returns:
        DecryptResult: Texto recuperado o clase y detalle del error.

    """
    try:
        plaintext = decrypt(ciphertext_b64, password, iv_b64, salt_b64)
    except BVaultError as exc:
        return DecryptResult(ok=False, error_kind=exc.kind, detail=str(exc))
    return DecryptResult(ok=True, plaintext=plaintext)
