import pytest

from formgen.models import RenderKind
from formgen.selection import selection_attribute, selection_key


@pytest.mark.parametrize(
    "kind, key",
    [
        (RenderKind.SELECT, "selected"),
        (RenderKind.MULTISELECT, "selected"),
        (RenderKind.RADIO, "checked"),
        (RenderKind.CHECKBOX_LIST, "checked"),
    ],
)
def test_selection_key_per_kind(kind, key):
    assert selection_key(kind) == key
    assert selection_attribute({"value": "a"}, kind, "a") == {key: key}


def test_scalar_default_matches_by_equality():
    assert selection_attribute({"value": "a"}, RenderKind.SELECT, "b") == {}
    assert selection_attribute({"value": "b"}, RenderKind.SELECT, "b") == {"selected": "selected"}


def test_collection_default_matches_by_membership():
    default = {"v1", "v3"}
    assert selection_attribute({"value": "v1"}, RenderKind.MULTISELECT, default) == {"selected": "selected"}
    assert selection_attribute({"value": "v2"}, RenderKind.MULTISELECT, default) == {}
    assert selection_attribute({"value": "v3"}, RenderKind.CHECKBOX_LIST, ["v3"]) == {"checked": "checked"}


def test_numbers_and_strings_compare_equal():
    assert selection_attribute({"value": 1}, RenderKind.RADIO, "1") == {"checked": "checked"}
    assert selection_attribute({"value": "2"}, RenderKind.MULTISELECT, [1, 2]) == {"selected": "selected"}


def test_empty_value_or_default_never_matches():
    assert selection_attribute({"value": ""}, RenderKind.SELECT, "") == {}
    assert selection_attribute({}, RenderKind.SELECT, "a") == {}
    assert selection_attribute({"value": "a"}, RenderKind.SELECT, None) == {}
    assert selection_attribute({"value": "a"}, RenderKind.MULTISELECT, []) == {}


def test_unsupported_kind_raises():
    with pytest.raises(ValueError, match="textarea"):
        selection_attribute({"value": "a"}, "textarea", "a")
