import unittest

from src.elements import el
from src.locations import DEFAULT_LOCATIONS
from src.ui.shell import render
from src.ui.streamlit_document import StreamlitDocument, StreamlitSink, client_ip


class FakePlaceholder:
    def __init__(self):
        self.body = None

    def markdown(self, body, unsafe_allow_html=False):
        self.body = body

    def empty(self):
        self.body = None


class FakeStreamlit:
    def __init__(self, clicked=()):
        self.clicked = set(clicked)
        self.calls = []
        self.placeholders = []

    def markdown(self, body, unsafe_allow_html=False):
        self.calls.append(("markdown", body))

    def button(self, label, key=None):
        self.calls.append(("button", label))
        return label in self.clicked

    def empty(self):
        placeholder = FakePlaceholder()
        self.placeholders.append(placeholder)
        self.calls.append(("empty", None))
        return placeholder


class StreamlitDocumentTest(unittest.TestCase):
    def test_static_tree_is_one_markdown_block(self):
        fake = FakeStreamlit()
        StreamlitDocument(fake).mount(el("section", {}, el("h2", {}, "Results"), el("p", {}, "a & b")))
        self.assertEqual(fake.calls, [("markdown", "<section><h2>Results</h2><p>a &amp; b</p></section>")])

    def test_shell_writes_buttons_and_placeholder(self):
        fake = FakeStreamlit()
        body = el("body")
        render(body, DEFAULT_LOCATIONS, lambda loc: None, lambda: None)
        StreamlitDocument(fake).mount(body)
        labels = [value for kind, value in fake.calls if kind == "button"]
        self.assertEqual(labels, [loc.title for loc in DEFAULT_LOCATIONS])
        self.assertEqual(fake.calls[-1], ("empty", None))

    def test_click_dispatched_after_placeholder_exists(self):
        fake = FakeStreamlit(clicked={"Tokyo"})
        document = StreamlitDocument(fake)
        sink = StreamlitSink(document)
        seen = []

        def on_search(location):
            seen.append(location.title)
            sink.mount(el("p", {}, f"searching {location.title}"))

        body = el("body")
        render(body, DEFAULT_LOCATIONS, on_search, lambda: None)
        document.mount(body)
        self.assertEqual(seen, ["Tokyo"])
        self.assertEqual(fake.placeholders[0].body, "<p>searching Tokyo</p>")

    def test_sink_without_placeholder_is_noop(self):
        sink = StreamlitSink(StreamlitDocument(FakeStreamlit()))
        sink.clear()
        sink.mount(el("p", {}, "lost"))

    def test_sink_clear_empties_placeholder(self):
        fake = FakeStreamlit()
        document = StreamlitDocument(fake)
        document.mount(el("main", {}, el("div", {"class": "output"})))
        sink = StreamlitSink(document)
        sink.mount(el("p", {}, "x"))
        sink.clear()
        self.assertIsNone(fake.placeholders[0].body)


class FakeContext:
    def __init__(self, headers=None, ip_address=None):
        self.headers = headers or {}
        self.ip_address = ip_address


class ClientIpTest(unittest.TestCase):
    def test_forwarded_for_wins(self):
        context = FakeContext({"X-Forwarded-For": "198.51.100.23, 10.0.0.2"}, ip_address="10.0.0.2")
        self.assertEqual(client_ip(context), "198.51.100.23")

    def test_falls_back_to_peer_address(self):
        self.assertEqual(client_ip(FakeContext(ip_address="203.0.113.7")), "203.0.113.7")

    def test_local_session_has_no_address(self):
        self.assertIsNone(client_ip(FakeContext()))


if __name__ == "__main__":
    unittest.main()
