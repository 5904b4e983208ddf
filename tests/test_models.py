import json

import pytest

from filtro_devs.models import MatchMode, TagCatalog, TagInfo


@pytest.mark.parametrize("value", ["any", "ANY", "or", "ou", " Ou ", MatchMode.ANY])
def test_parse_any(value):
    assert MatchMode.parse(value) is MatchMode.ANY


@pytest.mark.parametrize("value", ["all", "and", "e", "E", MatchMode.ALL])
def test_parse_all(value):
    assert MatchMode.parse(value) is MatchMode.ALL


def test_parse_unknown_mode():
    with pytest.raises(ValueError):
        MatchMode.parse("xor")


def test_default_catalog():
    catalog = TagCatalog()
    assert catalog.ids() == ["java", "javascript", "python"]
    assert catalog.label_for("javascript") == "JavaScript"
    assert "Python" in catalog
    assert len(catalog) == 3


def test_unknown_tag_label_falls_back_to_id():
    assert TagCatalog().label_for("cobol") == "cobol"
    assert TagCatalog().get("cobol") is None


def test_custom_catalog():
    catalog = TagCatalog([TagInfo("Go", "Go", "go.svg")])
    assert catalog.get("go").image == "go.svg"
    assert [t.tag_id for t in catalog] == ["Go"]


def test_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"filter": "rust", "description": "Rust", "image": "rust.svg"},
                {"filter": "", "description": "ignorado"},
            ]
        ),
        encoding="utf-8",
    )
    catalog = TagCatalog.from_file(path)
    assert catalog.ids() == ["rust"]
    assert catalog.label_for("rust") == "Rust"


@pytest.mark.parametrize(
    "content",
    [
        "{quebrado",
        json.dumps({"filter": "java"}),
        json.dumps(["java", "python"]),
    ],
)
def test_catalog_from_file_rejects_invalid_shape(tmp_path, content):
    path = tmp_path / "catalog.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="TAG_CATALOG_PATH"):
        TagCatalog.from_file(path)


def test_catalog_from_missing_file(tmp_path):
    with pytest.raises(ValueError, match="TAG_CATALOG_PATH"):
        TagCatalog.from_file(tmp_path / "nada.json")
