# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from bvault.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="BVault", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 BVault")
st.write(
    "Descifrado de datos protegidos con contraseña: PBKDF2-HMAC-SHA256 "
    "(100 000 iteraciones) + AES-256-CBC con relleno PKCS#7."
)
st.info("Ve a **Descifrar** para recuperar un texto o a **Baúl** para leer valores guardados.")
st.caption(
    "Aviso: el esquema no autentica el ciphertext. Un fallo de descifrado puede "
    "deberse a una contraseña incorrecta o a datos corruptos o manipulados."
)
