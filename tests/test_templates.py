import pytest
from jinja2 import UndefinedError
from markupsafe import Markup

from everythingsings.content import DEFAULT_IDENTITY
from everythingsings.renderers import render_profile
from everythingsings.templates import TEMPLATES_DIR, TemplateEngine, get_engine


def test_bundled_templates_exist():
    for name in (
        "head.html.jinja",
        "body.html.jinja",
        "profile.html.jinja",
        "link_catalog.html.jinja",
    ):
        assert (TEMPLATES_DIR / name).is_file()


def test_get_engine_is_shared():
    assert get_engine() is get_engine()
    assert get_engine().templates_dir == TEMPLATES_DIR


def test_engine_autoescapes_jinja_templates(tmp_path):
    (tmp_path / "card.html.jinja").write_text("<p>{{ value }}</p>", encoding="utf-8")
    engine = TemplateEngine(tmp_path)
    rendered = engine.render("card.html.jinja", value="<b>&</b>")
    assert isinstance(rendered, Markup)
    assert rendered == "<p>&lt;b&gt;&amp;&lt;/b&gt;</p>"
    # Markup values pass through untouched
    assert engine.render("card.html.jinja", value=Markup("<b>ok</b>")) == "<p><b>ok</b></p>"


def test_engine_rejects_undefined_variables(tmp_path):
    (tmp_path / "x.html.jinja").write_text("{{ missing }}", encoding="utf-8")
    with pytest.raises(UndefinedError):
        TemplateEngine(tmp_path).render("x.html.jinja")


def test_renderers_accept_custom_engine(tmp_path):
    (tmp_path / "profile.html.jinja").write_text(
        "<div>{{ identity.name }}:{{ avatar_size }}</div>", encoding="utf-8"
    )
    html = render_profile(DEFAULT_IDENTITY, engine=TemplateEngine(tmp_path))
    assert html == "<div>EverythingSings:128</div>"
