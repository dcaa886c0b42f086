# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-CBC y retirada de relleno PKCS#7.
# --------------------------------------------------------------
"""Rutinas de descifrado simétrico por bloques sin autenticación."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from bvault.crypto_kdf import KEY_LENGTH
from bvault.errors import DecryptionError, InvalidIVLengthError, InvalidKeyLengthError

BLOCK_SIZE = 16
IV_LENGTH = 16


def aes_cbc_decrypt_with_key(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra bloques AES-256-CBC sin retirar el relleno.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        iv (bytes): Vector de inicialización de 128 bits.
        ciphertext (bytes): Datos cifrados, múltiplo no nulo de 16 bytes.

    Returns:
        bytes: Claro con relleno, de la misma longitud que el ciphertext.

    Raises:
        InvalidIVLengthError: Si el IV no mide 16 bytes.
        InvalidKeyLengthError: Si la clave no mide 32 bytes.
        DecryptionError: Si el ciphertext está vacío o desalineado.

    """
    if len(iv) != IV_LENGTH:
        raise InvalidIVLengthError(f"IV must be {IV_LENGTH} bytes, got {len(iv)}")
    if len(key) != KEY_LENGTH:
        raise InvalidKeyLengthError(f"key must be {KEY_LENGTH} bytes, got {len(key)}")
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise DecryptionError(
            f"ciphertext length {len(ciphertext)} is not a nonzero multiple of {BLOCK_SIZE}"
        )

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    try:
        return decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError:
        raise DecryptionError("block decryption failed") from None


def pkcs7_unpad(padded: bytes) -> bytes:
    """Retira el relleno PKCS#7 de bloques de 128 bits.

    Raises:
        DecryptionError: Si el último byte es 0, mayor que 16 o los bytes finales no coinciden.

    """
    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError:
        raise DecryptionError("decryption / padding error") from None


def aes_cbc_decrypt_padded(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra con AES-256-CBC y devuelve el claro ya sin relleno."""

    return pkcs7_unpad(aes_cbc_decrypt_with_key(key, iv, ciphertext))
