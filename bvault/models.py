# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del sobre cifrado y del resultado de descifrado.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan las estructuras de intercambio del descifrado."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bvault.errors import ErrorKind


class EncryptedPayload(BaseModel):
    """Sobre cifrado tal como lo emite el cifrador compañero.

    Attributes:
        encrypted_data (str): Ciphertext en Base64 (clave JSON `encryptedData`).
        iv (str): Vector de inicialización en Base64.
        salt (str): Salt de la derivación en Base64.

    """

    model_config = ConfigDict(populate_by_name=True)

    encrypted_data: str = Field(alias="encryptedData")
    iv: str
    salt: str

    @classmethod
    def from_json(cls, raw: str) -> "EncryptedPayload":
        """Construye el sobre a partir de su representación JSON."""

        return cls.model_validate_json(raw)

    def to_json(self) -> str:
        """Serializa el sobre con los nombres de campo del cifrador (`encryptedData`)."""

        return self.model_dump_json(by_alias=True)


class DecryptResult(BaseModel):
    """Resultado de un descifrado sin excepciones.

    Attributes:
        ok (bool): Indica si se recuperó el texto.
        plaintext (Optional[str]): Texto recuperado cuando `ok` es verdadero.
        error_kind (Optional[ErrorKind]): Clase del fallo en caso contrario.
        detail (Optional[str]): Mensaje legible asociado al fallo.

    """

    ok: bool
    plaintext: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    detail: Optional[str] = None
