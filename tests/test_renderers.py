import re

from markupsafe import Markup

from everythingsings.content import (
    DEFAULT_CATALOG,
    DEFAULT_IDENTITY,
    LinkCatalog,
    LinkEntry,
    LinkGroup,
    SiteIdentity,
)
from everythingsings.renderers import (
    AVATAR_SIZE,
    render_body,
    render_link_catalog,
    render_profile,
)

ANCHOR_RE = re.compile(r"<a [^>]*>.*?</a>", re.DOTALL)


def small_catalog() -> LinkCatalog:
    return LinkCatalog(
        (
            LinkGroup(
                "Create",
                (
                    LinkEntry("Sigil", "https://sigil.example", "Explore Sigil"),
                    LinkEntry("Music", "https://music.example"),
                ),
            ),
            LinkGroup("Connect", (LinkEntry("", "https://x.example"),)),
        )
    )


# --- Link catalog ---


def test_link_catalog_is_labelled_nav():
    html = render_link_catalog(DEFAULT_CATALOG)
    assert isinstance(html, Markup)
    assert html.startswith("<nav")
    assert 'aria-label="Profile links"' in html
    assert html.rstrip().endswith("</nav>")


def test_link_catalog_counts_groups_and_items():
    html = render_link_catalog(DEFAULT_CATALOG)
    assert html.count('<section class="link-group"') == 5
    assert html.count('class="link-group-label"') == 5
    assert html.count('class="link-item"') == 10
    assert html.count("<ul>") == 5


def test_link_catalog_preserves_group_order():
    html = render_link_catalog(DEFAULT_CATALOG)
    positions = [html.index(f">{group.name}</h2>") for group in DEFAULT_CATALOG]
    assert positions == sorted(positions)


def test_link_catalog_preserves_link_order_within_groups():
    html = render_link_catalog(DEFAULT_CATALOG)
    positions = [html.index(f'href="{href}"') for href in DEFAULT_CATALOG.hrefs]
    assert positions == sorted(positions)


def test_every_anchor_asserts_identity():
    html = render_link_catalog(DEFAULT_CATALOG)
    anchors = ANCHOR_RE.findall(html)
    assert len(anchors) == 10
    for anchor in anchors:
        assert 'rel="me noopener"' in anchor
        assert 'itemprop="sameAs"' in anchor
        assert 'class="link-card"' in anchor


def test_description_span_only_when_described():
    html = render_link_catalog(small_catalog())
    described, plain, empty = ANCHOR_RE.findall(html)

    assert '<span class="link-label">Sigil</span>' in described
    assert '<span class="link-description">Explore Sigil</span>' in described
    assert 'title="Explore Sigil"' in described

    assert '<span class="link-label">Music</span>' in plain
    assert "link-description" not in plain
    assert 'title="Music"' in plain

    # empty label still renders the element
    assert '<span class="link-label"></span>' in empty


def test_link_catalog_escapes_text():
    catalog = LinkCatalog(
        (
            LinkGroup(
                "<Tools>",
                (LinkEntry('A "quoted" & <b>', "https://a.example/?x=1&y=2", "<i>"),),
            ),
        )
    )
    html = render_link_catalog(catalog)
    assert "<Tools>" not in html
    assert "&lt;Tools&gt;" in html
    assert "<b>" not in html and "<i>" not in html
    assert 'href="https://a.example/?x=1&amp;y=2"' in html
    assert "&#34;quoted&#34;" in html


def test_empty_catalog_renders_empty_nav():
    html = render_link_catalog(LinkCatalog())
    assert "<nav" in html
    assert "link-group" not in html


# --- Profile card ---


def test_profile_has_hcard_and_person_scope():
    html = render_profile(DEFAULT_IDENTITY)
    assert html.startswith('<article class="h-card profile-card"')
    assert "itemscope" in html
    assert 'itemtype="https://schema.org/Person"' in html


def test_profile_identity_link():
    html = render_profile(DEFAULT_IDENTITY)
    assert (
        '<a href="https://everythingsings.art" class="u-url" rel="me" itemprop="url">'
        in html
    )


def test_profile_avatar():
    html = render_profile(DEFAULT_IDENTITY)
    assert 'src="https://everythingsings.art/avatar.png"' in html
    assert 'alt="EverythingSings avatar"' in html
    assert 'class="u-photo avatar"' in html
    assert 'itemprop="image"' in html
    assert f'width="{AVATAR_SIZE}"' in html
    assert f'height="{AVATAR_SIZE}"' in html


def test_profile_name_and_note():
    html = render_profile(DEFAULT_IDENTITY)
    assert '<h1 class="p-name" itemprop="name">EverythingSings</h1>' in html
    assert (
        f'<p class="p-note" itemprop="description">{DEFAULT_IDENTITY.description}</p>'
        in html
    )


def test_profile_encodes_each_property_once():
    html = render_profile(DEFAULT_IDENTITY)
    for marker in ("p-name", "p-note", "u-photo", "u-url"):
        assert html.count(marker) == 1
    for prop in ("name", "description", "image", "url"):
        assert html.count(f'itemprop="{prop}"') == 1


def test_profile_escapes_identity():
    identity = SiteIdentity(
        name="<script>alert(1)</script>",
        url="https://evil.example",
        description='Say "hi" & leave',
        avatar_path="/a.png",
    )
    html = render_profile(identity)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "Say &#34;hi&#34; &amp; leave" in html


# --- Body ---


def test_body_order_and_scope():
    html = render_body(DEFAULT_IDENTITY, DEFAULT_CATALOG)
    assert html.startswith('<body itemscope itemtype="https://schema.org/WebPage">')
    assert html.index("h-card") < html.index("link-list") < html.index("<footer></footer>")
    assert '<main class="container">' in html
    assert "shader-canvas" not in html


def test_body_background_canvas():
    html = render_body(DEFAULT_IDENTITY, DEFAULT_CATALOG, background_script="/js/bg.js")
    assert '<canvas id="shader-canvas" aria-hidden="true"></canvas>' in html
    assert "<noscript>" in html
