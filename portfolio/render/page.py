"""
Portfolio page rendering.

Each content type has a pure function returning its markup; the page is
composed by nesting those fragments in content order.
"""

from typing import Sequence

from portfolio.content import (
    DESCRIPTION,
    SHELVES,
    SITE_DOMAIN,
    SITE_URL,
    SITES,
    TITLE,
    Project,
    Shelf,
    Site,
)
from portfolio.render.markup import DOCTYPE, Element, Fragment, fragment, h, render

FONT_AWESOME_KIT = "https://kit.fontawesome.com/4f61f8988e.js"

BADGE_STYLE = "font-size: 0.33em; font-weight: 100; padding: 0.75vmax; width: 40vw;"


def meta_tags() -> Fragment:
    """Title, description, Open Graph and Twitter card tags for <head>."""
    return fragment(
        h("title", TITLE),
        h("meta", name="description", content=DESCRIPTION),

        h("meta", property="og:url", content=SITE_URL),
        h("meta", property="og:type", content="website"),
        h("meta", property="og:title", content=TITLE),
        h("meta", property="og:description", content=DESCRIPTION),

        h("meta", name="twitter:card", content="summary_large_image"),
        h("meta", property="twitter:domain", content=SITE_DOMAIN),
        h("meta", property="twitter:url", content=SITE_URL),
        h("meta", name="twitter:title", content=TITLE),
        h("meta", name="twitter:description", content=DESCRIPTION),

        h("meta", charset="UTF-8"),
    )


def render_project(project: Project) -> Element:
    return h(
        "div",
        h("h1", project.name),
        h("p", project.description, style="width: 30ch;"),
        class_="neumorphic inset flex-column",
    )


def render_shelf(shelf: Shelf) -> Element:
    return h(
        "div",
        h("span", shelf.name, class_="neumorphic inset", style="font-weight: 100;"),
        h(
            "div",
            *(render_project(project) for project in shelf.projects),
            class_="flex-row",
            style="align-items: stretch; flex-wrap: wrap;",
        ),
        class_="neumorphic outset flex-column",
        style="font-size: 2rem; width: 95vw;",
    )


def render_site(site: Site) -> Element:
    return h(
        "a",
        h("span", class_=f"fab {site.icon}", style="font-size: 1.5rem;"),
        href=site.url,
        target="_blank",
        class_="clickable social neumorphic outset flex-row",
        style=f"color: {site.color}",
    )


def _header() -> Element:
    return h(
        "header",
        h("span", TITLE, class_="neumorphic outset", style="padding: 0.5vmax 1vmax;"),
        h(
            "div",
            h(
                "span",
                "\N{PERSONAL COMPUTER} Level 100 Technomancer (B.Sc. Computer Science)",
                class_="neumorphic inset",
                style=BADGE_STYLE,
            ),
            h(
                "span",
                "\N{ABACUS} Level 100 Mathemagician (B.Sc. Applied Mathematics)",
                class_="neumorphic inset",
                style=BADGE_STYLE,
            ),
            class_="flex-column",
            style="align-items: flex-start; justify-content: space-around;",
        ),
        class_="flex-row",
        style="font-size: 4rem; justify-content: flex-start;",
    )


def page(shelves: Sequence[Shelf] = SHELVES, sites: Sequence[Site] = SITES) -> Fragment:
    """Build the complete portfolio document."""
    return fragment(
        DOCTYPE,
        h(
            "html",
            h(
                "head",
                meta_tags(),
                h("link", rel="stylesheet", href="/styles.css"),
                h("script", defer=True, src=FONT_AWESOME_KIT, crossorigin="anonymous"),
            ),
            h(
                "body",
                _header(),
                h("main", *(render_shelf(shelf) for shelf in shelves)),
                h(
                    "footer",
                    *(render_site(site) for site in sites),
                    class_="neumorphic inset flex-row",
                    style="font-size: 2rem;",
                ),
                class_="flex-column",
            ),
        ),
    )


def render_page(shelves: Sequence[Shelf] = SHELVES, sites: Sequence[Site] = SITES) -> str:
    """Serialize the portfolio page to HTML."""
    return render(page(shelves, sites))
