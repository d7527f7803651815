"""Rendering module."""

from portfolio.render.markup import DOCTYPE, Element, Fragment, h, fragment, render
from portfolio.render.page import (
    meta_tags,
    page,
    render_page,
    render_project,
    render_shelf,
    render_site,
)

__all__ = [
    "DOCTYPE",
    "Element",
    "Fragment",
    "h",
    "fragment",
    "render",
    "meta_tags",
    "page",
    "render_page",
    "render_project",
    "render_shelf",
    "render_site",
]
