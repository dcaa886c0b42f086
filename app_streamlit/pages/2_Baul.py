# --------------------------------------------------------------
# File: 2_Baul.py
# Description: Lectura de los valores guardados en el baúl local.
# --------------------------------------------------------------

import streamlit as st

from bvault.vault import VAULT_PATH, SecureVault

# Presenta el título de la sección.
st.title("🗄️ Baúl")
st.write("Archivo del baúl:", f"`{VAULT_PATH}`")

password = st.text_input("Contraseña del baúl", type="password", key="vault_pass")
if not password:
    st.info("Introduce la contraseña para leer los valores.")
    st.stop()

vault = SecureVault(password)
keys = vault.keys()
if not keys:
    st.info("El baúl está vacío.")
    st.stop()

sel = st.selectbox("Selecciona una clave:", keys, index=0)

col1, col2 = st.columns(2)
with col1:
    if st.button("🔓 Leer", key="btn_vault_get"):
        value = vault.get_item(sel)
        if value is None:
            # SECURITY: get_item purga los registros que no se pueden descifrar.
            st.error("No se pudo descifrar el valor; el registro se ha eliminado.")
        else:
            st.code(value, language="text")
with col2:
    if st.button("🗑️ Eliminar", key="btn_vault_rm"):
        vault.remove_item(sel)
        st.success(f"Clave {sel!r} eliminada.")
