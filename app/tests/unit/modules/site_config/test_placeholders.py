"""Tests for modules.site_config.placeholders."""

import copy

import pytest

from modules.site_config.placeholders import (
    ConfigTemplate,
    LiteralNode,
    TranslationRef,
    parse_placeholder,
    parse_template,
    render_template,
    resolve_translations,
)

TRANSLATIONS = {
    "config.header.logo.text": "My App",
    "config.header.navigation.pricing": "Pricing",
    "config.footer.copyright": "© 2025",
}


def lookup(key):
    return TRANSLATIONS.get(key, key)


@pytest.mark.unit
class TestParsePlaceholder:
    def test_exact_marker_is_translation_ref(self):
        assert parse_placeholder("t('config.header.logo.text')") == TranslationRef(
            "config.header.logo.text"
        )

    def test_key_may_contain_quote(self):
        assert parse_placeholder("t('config.it's')") == TranslationRef("config.it's")

    @pytest.mark.parametrize(
        "value",
        [
            "plain text",
            "t('')",
            "t(\"config.header\")",
            " t('config.header')",
            "t('config.header') ",
            "prefix t('config.header')",
            "t('config.header')\n",
            "t('config.header\nlogo')",
        ],
    )
    def test_anything_else_is_literal(self, value):
        assert parse_placeholder(value) == LiteralNode(value)


@pytest.mark.unit
class TestParseTemplate:
    def test_nested_structure_is_tagged(self):
        parsed = parse_template(
            {"logo": {"text": "t('config.header.logo.text')", "href": "/"}, "sticky": True}
        )
        assert parsed == {
            "logo": {
                "text": TranslationRef("config.header.logo.text"),
                "href": LiteralNode("/"),
            },
            "sticky": LiteralNode(True),
        }

    def test_lists_keep_order_and_length(self):
        parsed = parse_template(["a", "t('config.footer.copyright')", 3, None])
        assert parsed == [
            LiteralNode("a"),
            TranslationRef("config.footer.copyright"),
            LiteralNode(3),
            LiteralNode(None),
        ]

    def test_tuples_become_lists(self):
        assert parse_template(("a",)) == [LiteralNode("a")]

    def test_render_rejects_unknown_nodes(self):
        with pytest.raises(TypeError):
            render_template(object(), lookup)


@pytest.mark.unit
class TestResolveTranslations:
    def test_replaces_markers_at_any_depth(self):
        tree = {
            "header": {
                "logo": {"text": "t('config.header.logo.text')"},
                "navigation": [
                    {"label": "t('config.header.navigation.pricing')", "href": "/pricing"}
                ],
            },
            "footer": {"copyright": "t('config.footer.copyright')"},
        }
        assert resolve_translations(tree, lookup) == {
            "header": {
                "logo": {"text": "My App"},
                "navigation": [{"label": "Pricing", "href": "/pricing"}],
            },
            "footer": {"copyright": "© 2025"},
        }

    def test_scalars_pass_through(self):
        tree = {"count": 3, "ratio": 0.5, "enabled": False, "missing": None}
        assert resolve_translations(tree, lookup) == tree

    def test_input_is_not_modified(self):
        tree = {"logo": {"text": "t('config.header.logo.text')"}}
        original = copy.deepcopy(tree)
        resolve_translations(tree, lookup)
        assert tree == original

    def test_is_idempotent(self):
        tree = {"items": ["t('config.header.logo.text')", "literal"]}
        once = resolve_translations(tree, lookup)
        assert resolve_translations(once, lookup) == once
        assert resolve_translations(tree, lookup) == once

    def test_unknown_key_uses_lookup_result(self):
        assert resolve_translations("t('config.unknown')", lookup) == "config.unknown"


@pytest.mark.unit
class TestConfigTemplate:
    def test_keys_in_document_order(self):
        template = ConfigTemplate(
            {
                "b": "t('config.header.logo.text')",
                "a": ["x", {"c": "t('config.footer.copyright')"}],
            }
        )
        assert template.keys() == ["config.header.logo.text", "config.footer.copyright"]

    def test_render_returns_fresh_documents(self):
        template = ConfigTemplate({"logo": {"text": "t('config.header.logo.text')"}})
        first = template.render(lookup)
        first["logo"]["text"] = "changed"
        assert template.render(lookup) == {"logo": {"text": "My App"}}

    def test_render_per_locale(self):
        template = ConfigTemplate({"text": "t('config.header.logo.text')"})
        french = {"config.header.logo.text": "Mon App"}
        assert template.render(french.__getitem__) == {"text": "Mon App"}
        assert template.render(lookup) == {"text": "My App"}

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "template.yml"
        path.write_text(
            "logo:\n  text: t('config.header.logo.text')\n  href: /\n", encoding="utf-8"
        )
        template = ConfigTemplate.from_yaml(path)
        assert template.keys() == ["config.header.logo.text"]
        assert template.render(lookup) == {"logo": {"text": "My App", "href": "/"}}

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert ConfigTemplate.from_yaml(path).render(lookup) == {}

    def test_from_yaml_invalid(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("logo: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            ConfigTemplate.from_yaml(path)

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigTemplate.from_yaml(tmp_path / "missing.yml")
