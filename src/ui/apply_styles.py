from pathlib import Path

import streamlit as st

from src.log import log

STYLES_PATH = Path(__file__).resolve().parent / "styles.css"


def apply_styles(css_path: Path = STYLES_PATH, st_module=st) -> bool:
    """Inject the forecast table and location menu CSS; False when the sheet can't be read."""
    try:
        css = css_path.read_text(encoding="utf-8")
    except OSError as exc:
        log(f"WARN: styles not applied from {css_path.name}: {exc}")
        return False
    st_module.markdown(f"<style>\n{css}</style>", unsafe_allow_html=True)
    return True
