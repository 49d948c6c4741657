from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from jinja2 import UndefinedError
from markupsafe import Markup

from formgen.jinja_env import form_globals, template_env


def test_form_globals_return_markup():
    helpers = form_globals()

    assert set(helpers) == {"select", "dropdown", "multiselect", "radio", "checkbox_list"}
    result = helpers["radio"]("a", {"name": "r"}, ["a"])
    assert isinstance(result, Markup)
    assert result == '<label><input type="radio" value="a" name="r" checked="checked"/> a</label>'


def test_template_renders_fields_unescaped(tmp_path: Path):
    (tmp_path / "page.jinja").write_text(
        '<form>{{ select(choice, {"name": "fruit"}, fruits) }}<p>{{ note }}</p></form>',
        encoding="utf-8",
    )
    env = template_env([tmp_path])

    html = env.get_template("page.jinja").render(
        choice="pear", fruits={"apple": "Apple", "pear": "Pear"}, note="<b>"
    )

    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("select")["name"] == "fruit"
    assert soup.find("option", selected=True)["value"] == "pear"
    assert "&lt;b&gt;" in html


def test_jinja_strictundefined(tmp_path: Path):
    (tmp_path / "strict.jinja").write_text("{{ missing_value }}", encoding="utf-8")
    env = template_env([tmp_path])

    with pytest.raises(UndefinedError):
        env.get_template("strict.jinja").render()
