# --------------------------------------------------------------
# File: 1_Descifrar.py
# Description: Formulario de Streamlit para descifrar un sobre con contraseña.
# --------------------------------------------------------------

import streamlit as st
from pydantic import ValidationError

from bvault.decryptor import try_decrypt
from bvault.errors import ErrorKind
from bvault.models import EncryptedPayload

# Presenta el título de la sección.
st.title("🔓 Descifrar")

tab_fields, tab_json = st.tabs(["Campos", "Sobre JSON"])

# Entrada campo a campo en Base64 estándar.
with tab_fields:
    ciphertext_b64 = st.text_area("Ciphertext (Base64)", key="dec_ct")
    iv_b64 = st.text_input("IV (Base64, 16 bytes)", key="dec_iv")
    salt_b64 = st.text_input("Salt (Base64)", key="dec_salt")

# Entrada como sobre {"encryptedData", "iv", "salt"}.
with tab_json:
    raw_envelope = st.text_area("Sobre JSON", key="dec_json")
    if raw_envelope:
        try:
            payload = EncryptedPayload.from_json(raw_envelope)
            ciphertext_b64, iv_b64, salt_b64 = payload.encrypted_data, payload.iv, payload.salt
            st.caption("Sobre válido; se usarán sus campos.")
        except ValidationError as exc:
            st.error(f"Sobre JSON inválido: {exc.error_count()} error(es).")

password = st.text_input("Contraseña", type="password", key="dec_pass")

disabled = not (ciphertext_b64 and iv_b64 and salt_b64 and password)

if st.button("Descifrar", disabled=disabled, key="btn_decrypt"):
    result = try_decrypt(ciphertext_b64, password, iv_b64, salt_b64)
    if result.ok:
        st.success("Texto recuperado.")
        st.code(result.plaintext, language="text")
    else:
        st.error(f"{result.error_kind.value}: {result.detail}")
        if result.error_kind is ErrorKind.DECRYPTION_ERROR:
            st.warning(
                "Sin verificación de integridad no se puede distinguir entre contraseña "
                "incorrecta, ciphertext corrupto o datos manipulados."
            )
