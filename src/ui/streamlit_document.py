import html

import streamlit as st

from src.elements import Element, TextNode, to_html
from src.log import log

PLACEHOLDER_CLASSES = frozenset({"output"})


def _is_button(node: Element) -> bool:
    return node.tag == "button" and bool(node.listeners.get("click"))


def _is_placeholder(node: Element) -> bool:
    return any(name in PLACEHOLDER_CLASSES for name in node.class_list)


def _is_interactive(node: Element) -> bool:
    return any(_is_button(n) or _is_placeholder(n) for n in node.iter())


class StreamlitDocument:
    """
    Writes an element tree into the running Streamlit script.

    Static subtrees go out as one markdown block, click-enabled buttons become
    st.button widgets and output containers become st.empty() placeholders.
    Clicks are dispatched after the whole tree is written so that the handlers
    can render into placeholders further down the page.
    """

    def __init__(self, st_module=st):
        self._st = st_module
        self._placeholders = {}
        self._clicked: list[Element] = []
        self._button_count = 0

    def mount(self, tree: Element) -> None:
        self._clicked = []
        self._write(tree)
        clicked, self._clicked = self._clicked, []
        for button in clicked:
            button.dispatch("click")

    def query(self, selector: str):
        return self._placeholders.get(selector)

    def _write(self, node: Element | TextNode) -> None:
        if isinstance(node, TextNode):
            self._st.markdown(html.escape(node.data), unsafe_allow_html=True)
            return
        if _is_button(node):
            self._button_count += 1
            label = node.text_content
            if self._st.button(label, key=f"button_{self._button_count}_{label}"):
                self._clicked.append(node)
            return
        if _is_placeholder(node):
            placeholder = self._st.empty()
            for name in node.class_list:
                self._placeholders[f".{name}"] = placeholder
            return
        if not _is_interactive(node):
            self._st.markdown(to_html(node), unsafe_allow_html=True)
            return
        for child in node.children:
            self._write(child)


class StreamlitSink:
    def __init__(self, document: StreamlitDocument, selector: str = ".output"):
        self.document = document
        self.selector = selector

    def _placeholder(self):
        placeholder = self.document.query(self.selector)
        if placeholder is None:
            log(f"WARN: could not find {self.selector}")
        return placeholder

    def mount(self, tree: Element) -> None:
        placeholder = self._placeholder()
        if placeholder is not None:
            placeholder.markdown(to_html(tree), unsafe_allow_html=True)

    def clear(self) -> None:
        placeholder = self._placeholder()
        if placeholder is not None:
            placeholder.empty()


def client_ip(context=None) -> str | None:
    """
    Address of the browser driving this session. A proxy's X-Forwarded-For wins over
    the socket peer, which behind a proxy is the proxy itself.
    """
    context = context if context is not None else st.context
    forwarded = (context.headers or {}).get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return context.ip_address
