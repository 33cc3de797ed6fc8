import asyncio

import streamlit as st

from src.controller import SearchController
from src.elements import el
from src.geolocation import IpGeolocation
from src.locations import DEFAULT_LOCATIONS
from src.settings import GEOLOCATION_ENABLED
from src.ui.apply_styles import apply_styles
from src.ui.shell import APP_TITLE, render
from src.ui.streamlit_document import StreamlitDocument, StreamlitSink, client_ip

st.set_page_config(
    page_title=APP_TITLE,
    layout="centered",
)

apply_styles()

with st.sidebar:
    share_location = st.checkbox(
        "Share my location",
        value=False,
        help="Allows an approximate position lookup from your IP address.",
        disabled=not GEOLOCATION_ENABLED,
    )

document = StreamlitDocument()
sink = StreamlitSink(document)
geolocation = IpGeolocation(client_ip, allowed=lambda: share_location) if GEOLOCATION_ENABLED else None
controller = SearchController(sink, geolocation=geolocation)

# Handlers run after the whole shell is written, so .output is in place.
body = el("body")
render(
    body,
    DEFAULT_LOCATIONS,
    on_search=lambda location: asyncio.run(controller.on_search(location)),
    on_search_my_location=lambda: asyncio.run(controller.on_search_my_location()),
)
document.mount(body)
