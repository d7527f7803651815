"""Tests for markup serialization and page rendering."""

import dataclasses
import html as html_lib

import pytest

from portfolio.content import SHELVES, SITES, Project, Shelf, Site
from portfolio.render.markup import escape_attr, escape_text
from portfolio.render import (
    DOCTYPE,
    fragment,
    h,
    meta_tags,
    render,
    render_page,
    render_project,
    render_site,
)


class TestMarkup:
    """Serialization of the markup tree."""

    def test_nested_elements(self):
        assert render(h("div", h("p", "hi"), id="x")) == '<div id="x"><p>hi</p></div>'

    def test_attribute_names(self):
        html = render(h("span", class_="fab", data_value="1", http_equiv="x"))
        assert html == '<span class="fab" data-value="1" http-equiv="x"></span>'

    def test_void_element_has_no_closing_tag(self):
        assert render(h("meta", charset="UTF-8")) == '<meta charset="UTF-8">'

    def test_boolean_attributes(self):
        assert render(h("script", defer=True, async_=False)) == "<script defer></script>"

    def test_text_escaping(self):
        assert render(h("p", "a < b & c > d")) == "<p>a &lt; b &amp; c &gt; d</p>"

    def test_apostrophes_and_quotes_left_alone_in_text(self):
        assert render(h("p", "it's \"fine\"")) == "<p>it's \"fine\"</p>"

    def test_escape_text_matches_html_escape(self):
        assert escape_text("it's \"x\" <&>") == html_lib.escape("it's \"x\" <&>", quote=False)
        assert escape_attr("it's \"x\"") == "it's &quot;x&quot;"

    def test_attribute_escaping(self):
        html = render(h("a", href='/?a=1&b="2"'))
        assert html == '<a href="/?a=1&amp;b=&quot;2&quot;"></a>'

    def test_fragment_and_doctype(self):
        assert render(fragment(DOCTYPE, h("html"))) == "<!DOCTYPE html><html></html>"

    def test_unknown_node_rejected(self):
        with pytest.raises(TypeError):
            render(42)


class TestMetaTags:
    """The standalone <head> metadata fragment."""

    def setup_method(self):
        self.html = render(meta_tags())

    def test_single_title(self):
        assert self.html.count("<title>") == 1
        assert "<title>JT Raber</title>" in self.html

    def test_charset(self):
        assert self.html.count('<meta charset="UTF-8">') == 1

    def test_open_graph_and_twitter(self):
        assert '<meta property="og:url" content="https://jtraber.com/">' in self.html
        assert '<meta property="og:type" content="website">' in self.html
        assert '<meta name="twitter:card" content="summary_large_image">' in self.html
        assert '<meta property="twitter:domain" content="jtraber.com">' in self.html
        assert '<meta name="description" content="See what I have made!">' in self.html


class TestPage:
    """The full rendered document."""

    def setup_method(self):
        self.html = render_page()

    def test_document_shell(self):
        assert self.html.startswith("<!DOCTYPE html><html><head><title>JT Raber</title>")
        assert self.html.endswith("</footer></body></html>")
        assert '<link rel="stylesheet" href="/styles.css">' in self.html

    def test_shelves_once_in_order(self):
        positions = []
        for shelf in SHELVES:
            marker = f'style="font-weight: 100;">{shelf.name}</span>'
            assert self.html.count(marker) == 1
            positions.append(self.html.index(marker))
        assert positions == sorted(positions)

    def test_projects_once_in_order(self):
        positions = []
        for shelf in SHELVES:
            for project in shelf.projects:
                marker = f"<h1>{project.name}</h1>"
                assert self.html.count(marker) == 1
                positions.append(self.html.index(marker))
        assert positions == sorted(positions)
        assert self.html.count("<h1>") == sum(len(s.projects) for s in SHELVES)

    def test_projects_follow_their_shelf(self):
        second = self.html.index(f">{SHELVES[1].name}</span>")
        assert self.html.index(f"<h1>{SHELVES[0].projects[-1].name}</h1>") < second
        assert self.html.index(f"<h1>{SHELVES[1].projects[0].name}</h1>") > second

    def test_site_links_in_order(self):
        positions = []
        for site in SITES:
            marker = f'href="{site.url}"'
            assert self.html.count(marker) == 1
            positions.append(self.html.index(marker))
        assert positions == sorted(positions)
        assert self.html.index("<footer") < positions[0]

    def test_descriptions_keep_apostrophes(self):
        assert "cutting open it's wires" in self.html
        assert "make a satisfying 'click' noise" in self.html

    def test_custom_content_is_escaped(self):
        shelf = Shelf(
            name="Odds & Ends",
            projects=(Project(name="<Tag>", description="it's <b>bold</b> & more"),),
        )
        html = render_page(shelves=(shelf,), sites=())
        assert "Odds &amp; Ends" in html
        assert "<h1>&lt;Tag&gt;</h1>" in html
        assert "<p style=\"width: 30ch;\">it's &lt;b&gt;bold&lt;/b&gt; &amp; more</p>" in html
        assert "<b>" not in html


class TestFragments:
    """Per-entity rendering."""

    def test_project(self):
        html = render(render_project(Project(name="Demo", description="Short.")))
        assert html == (
            '<div class="neumorphic inset flex-column">'
            "<h1>Demo</h1>"
            '<p style="width: 30ch;">Short.</p>'
            "</div>"
        )

    def test_site(self):
        html = render(render_site(Site(url="https://example.com/", color="#123456", icon="fa-github")))
        assert html == (
            '<a href="https://example.com/" target="_blank" '
            'class="clickable social neumorphic outset flex-row" style="color: #123456">'
            '<span class="fab fa-github" style="font-size: 1.5rem;"></span>'
            "</a>"
        )


class TestContent:
    """The fixed content model."""

    def test_shelf_sizes(self):
        assert [shelf.name for shelf in SHELVES] == ["Personal Projects", "Freelance Experience"]
        assert [len(shelf.projects) for shelf in SHELVES] == [12, 4]
        assert len(SITES) == 4

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SHELVES[0].name = "Changed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
