import html
from typing import Any, Callable, Iterable

DOM_EVENTS = frozenset(
    {
        "blur",
        "change",
        "click",
        "dblclick",
        "focus",
        "input",
        "keydown",
        "keyup",
        "mousedown",
        "mouseout",
        "mouseover",
        "mouseup",
        "submit",
    }
)

VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link"})


class TextNode:
    def __init__(self, data: str):
        self.data = data
        self.parent: "Element | None" = None

    @property
    def text_content(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"TextNode({self.data!r})"


class Element:
    """
    Minimal in-memory element: tag, attributes, class list, listeners and children.
    """

    def __init__(self, tag: str):
        self.tag = tag
        self.attributes: dict[str, Any] = {}
        self.class_list: list[str] = []
        self.listeners: dict[str, list[Callable]] = {}
        self.children: list["Element | TextNode"] = []
        self.parent: "Element | None" = None

    def append_child(self, node: "Element | TextNode") -> "Element | TextNode":
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: "Element | TextNode") -> "Element | TextNode":
        self.children.remove(node)
        node.parent = None
        return node

    def add_event_listener(self, event: str, handler: Callable) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str) -> int:
        handlers = list(self.listeners.get(event, []))
        for handler in handlers:
            handler()
        return len(handlers)

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    def iter(self):
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def matches(self, selector: str) -> bool:
        tag, _, class_name = selector.partition(".")
        if tag and tag != self.tag:
            return False
        if class_name and class_name not in self.class_list:
            return False
        return True

    def query_selector(self, selector: str) -> "Element | None":
        for node in self.iter():
            if node is not self and node.matches(selector):
                return node
        return None

    def query_selector_all(self, selector: str) -> list["Element"]:
        return [node for node in self.iter() if node is not self and node.matches(selector)]

    def __repr__(self) -> str:
        classes = "".join(f".{name}" for name in self.class_list)
        return f"<{self.tag}{classes} children={len(self.children)}>"


def _append_children(element: Element, children: Iterable[Any]) -> None:
    for child in children:
        if child is None or child is False or (isinstance(child, str) and not child):
            continue
        if isinstance(child, (Element, TextNode)):
            element.append_child(child)
        elif isinstance(child, (list, tuple)):
            _append_children(element, child)
        else:
            element.append_child(TextNode(str(child)))


def el(tag: str, attributes: dict[str, Any] | None = None, *children: Any) -> Element:
    element = Element(tag)
    for key, value in (attributes or {}).items():
        if key in DOM_EVENTS:
            element.add_event_listener(key, value)
        elif key == "class":
            names = value.split() if isinstance(value, str) else list(value)
            element.class_list.extend(names)
        else:
            element.attributes[key] = value
    _append_children(element, children)
    return element


def empty(container: Element) -> None:
    for child in list(container.children):
        container.remove_child(child)


def to_html(node: Element | TextNode) -> str:
    if isinstance(node, TextNode):
        return html.escape(node.data)
    attrs = []
    if node.class_list:
        attrs.append(f'class="{html.escape(" ".join(node.class_list))}"')
    for key, value in node.attributes.items():
        attrs.append(f'{key}="{html.escape(str(value))}"')
    open_tag = " ".join([node.tag, *attrs])
    if node.tag in VOID_TAGS:
        return f"<{open_tag}>"
    inner = "".join(to_html(child) for child in node.children)
    return f"<{open_tag}>{inner}</{node.tag}>"
