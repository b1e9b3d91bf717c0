import streamlit as st


PREFIX = "slice"


def get_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def get_str(slice_name, name, default=""):
    value = get_slice(slice_name).get(name, default)
    if value is None:
        return str(default or "")
    return str(value)


def set_value(slice_name, name, value):
    get_slice(slice_name)[name] = value
