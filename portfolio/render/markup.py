"""
Minimal HTML markup tree.

Pages are built as nested Element nodes and serialized with render().
Text and attribute values are escaped on the way out, so content can be
passed in as plain strings.
"""

import html
from dataclasses import dataclass, field
from typing import List, Tuple, Union

VOID_TAGS = frozenset({"meta", "link", "br", "hr", "img", "input"})

AttrValue = Union[str, bool]


@dataclass(frozen=True)
class Element:
    """An HTML element with ordered attributes and children."""
    tag: str
    attrs: Tuple[Tuple[str, AttrValue], ...] = ()
    children: Tuple["Node", ...] = ()

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS


@dataclass(frozen=True)
class Fragment:
    """A sequence of sibling nodes without a wrapping element."""
    children: Tuple["Node", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Doctype:
    """The HTML5 document type declaration."""


DOCTYPE = Doctype()

Node = Union[Element, Fragment, Doctype, str]


def h(tag: str, *children: "Node", **attrs: AttrValue) -> Element:
    """
    Shorthand element constructor.

    Keyword names map to attribute names: a trailing underscore is dropped
    (``class_`` -> ``class``) and inner underscores become dashes.
    Attributes set to False are omitted.
    """
    pairs = tuple(
        (_attr_name(name), value)
        for name, value in attrs.items()
        if value is not False
    )
    return Element(tag, pairs, children)


def fragment(*children: "Node") -> Fragment:
    return Fragment(children)


def _attr_name(name: str) -> str:
    return name.rstrip("_").replace("_", "-")


def escape_text(value: str) -> str:
    """Escape characters that would be read as markup in text content."""
    return html.escape(value, quote=False)


def escape_attr(value: str) -> str:
    """
    Escape a value for use inside a double-quoted attribute.

    Only the double quote is added to the text escapes; html.escape with
    quote=True would also rewrite apostrophes.
    """
    return escape_text(value).replace('"', "&quot;")


def render(node: Node) -> str:
    """Serialize a markup tree to an HTML string."""
    parts: List[str] = []
    _write(node, parts)
    return "".join(parts)


def _write(node: Node, out: List[str]) -> None:
    if isinstance(node, str):
        out.append(escape_text(node))
    elif isinstance(node, Doctype):
        out.append("<!DOCTYPE html>")
    elif isinstance(node, Fragment):
        for child in node.children:
            _write(child, out)
    elif isinstance(node, Element):
        out.append("<" + node.tag)
        for name, value in node.attrs:
            if value is True:
                out.append(" " + name)
            else:
                out.append(f' {name}="{escape_attr(value)}"')
        out.append(">")
        if node.is_void:
            return
        for child in node.children:
            _write(child, out)
        out.append(f"</{node.tag}>")
    else:
        raise TypeError(f"cannot render {type(node).__name__}")
