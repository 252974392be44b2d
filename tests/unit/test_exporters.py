"""Tests for the token exporters."""

from __future__ import annotations

import json
import re

import pytest

from tokenbridge.core.exporters import EXPORTERS, export_tokens, generate_preview
from tokenbridge.core.exporters.common import set_path
from tokenbridge.core.exporters.css import token_name_to_css_var
from tokenbridge.core.exporters.tailwind import build_theme
from tokenbridge.core.exporters.typescript import sanitize_key
from tokenbridge.core.importers import import_tokens
from tokenbridge.core.ir import (
    DesignToken,
    ExportFormat,
    ExportOptions,
    TokenCollection,
    TokenType,
)

ALL_TYPES = list(TokenType)


def _options(*formats: str, **kwargs) -> ExportOptions:
    return ExportOptions(formats=list(formats), include_types=ALL_TYPES, **kwargs)


class TestExportOrchestration:
    def test_default_format_is_typescript(self, mixed_collection):
        result = export_tokens(mixed_collection)
        assert result.formats == ["typescript"]
        assert [f.path for f in result.files] == ["theme.ts"]

    def test_include_types_filter(self, mixed_collection):
        options = ExportOptions(formats=["css"], include_types=[TokenType.COLOR])
        result = export_tokens(mixed_collection, options)
        assert result.token_count == 2
        assert "spacing" not in result.files[0].content

    def test_unknown_format_yields_no_files(self, mixed_collection):
        result = export_tokens(mixed_collection, _options("sass"))
        assert result.files == []
        assert result.formats == ["sass"]

    def test_partial_success_with_unknown_format(self, mixed_collection):
        result = export_tokens(mixed_collection, _options("sass", "css"))
        assert [f.format for f in result.files] == ["css"]

    def test_every_format_emits_a_file_for_empty_input(self):
        empty = TokenCollection(name="Empty")
        for format in EXPORTERS:
            assert export_tokens(empty, _options(format)).files, format

    @pytest.mark.parametrize("format", list(EXPORTERS))
    def test_deterministic(self, mixed_collection, format):
        options = _options(format, generate_docs=True)
        first = export_tokens(mixed_collection, options)
        second = export_tokens(mixed_collection, options)
        assert first.files == second.files

    def test_result_json(self, mixed_collection):
        data = export_tokens(mixed_collection, _options("css")).to_json()
        assert data["tokenCount"] == 8
        assert data["files"][0]["path"] == "tokens.css"


class TestPreview:
    def test_first_file_only(self, mixed_collection):
        content = generate_preview(mixed_collection.tokens, "style-dictionary", _options())
        assert json.loads(content)["spacing"]["sm"]["value"] == 8

    def test_unknown_format(self, mixed_collection):
        assert generate_preview(mixed_collection.tokens, "sass") == ""


class TestStyleDictionaryExport:
    def test_tree_and_config(self, mixed_collection):
        files = export_tokens(mixed_collection, _options("style-dictionary")).files
        assert [f.path for f in files] == ["tokens.json", "config.json"]

        tree = json.loads(files[0].content)
        assert tree["colors"]["primary"] == {"value": "#3B82F6", "type": "color"}
        assert tree["spacing"]["sm"]["type"] == "size"
        assert "platforms" in json.loads(files[1].content)

    def test_comment_only_with_docs(self, mixed_collection):
        files = export_tokens(mixed_collection, _options("style-dictionary", generate_docs=True)).files
        assert json.loads(files[0].content)["colors"]["primary"]["comment"] == "Brand blue"

    def test_round_trip(self, mixed_collection):
        content = export_tokens(mixed_collection, _options("style-dictionary")).files[0].content
        reimported = import_tokens(content)
        triples = {(t.name, t.type, t.value) for t in reimported.tokens}
        assert triples == {(t.name, t.type, t.value) for t in mixed_collection.tokens}


class TestW3CExport:
    def test_schema_and_types(self, mixed_collection):
        tree = json.loads(export_tokens(mixed_collection, _options("w3c-dtcg")).files[0].content)
        assert tree["$schema"].startswith("https://design-tokens.github.io")
        assert tree["spacing"]["sm"] == {"$value": 8, "$type": "dimension"}
        assert tree["font-family"]["sans"]["$type"] == "fontFamily"

    def test_extensions_passed_through(self):
        token = DesignToken(
            name="colors/x", value="#fff", type=TokenType.COLOR, extensions={"com.x": {"a": 1}}
        )
        tree = json.loads(
            export_tokens(TokenCollection(tokens=[token]), _options("w3c-dtcg")).files[0].content
        )
        assert tree["colors"]["x"]["$extensions"] == {"com.x": {"a": 1}}

    def test_round_trip(self, mixed_collection):
        content = export_tokens(mixed_collection, _options("w3c-dtcg")).files[0].content
        reimported = import_tokens(content)
        triples = {(t.name, t.type, t.value) for t in reimported.tokens}
        assert triples == {(t.name, t.type, t.value) for t in mixed_collection.tokens}


class TestCssExport:
    def test_scenario_d(self, color_collection):
        css = export_tokens(color_collection, _options("css", css_prefix="ds")).files[0].content

        assert len(re.findall(r"^\s*--ds-[\w-]+:", css, re.MULTILINE)) == 3
        assert css.count(":root {") == 1
        assert css.count("{") == 1
        assert css.rstrip().endswith("}")

    @pytest.mark.parametrize(
        ("name", "prefix", "expected"),
        [
            ("colors/Primary", None, "--colors-primary"),
            ("colors/primaryDark", None, "--colors-primary-dark"),
            ("spacing/sm", "ds", "--ds-spacing-sm"),
            ("font size/Body", None, "--font-size-body"),
        ],
    )
    def test_variable_names(self, name, prefix, expected):
        assert token_name_to_css_var(name, prefix) == expected

    def test_units(self):
        tokens = [
            DesignToken(name="spacing/sm", value=8, type=TokenType.SPACING),
            DesignToken(name="duration/fast", value=150, type=TokenType.DURATION),
            DesignToken(name="line-height/body", value=1.5, type=TokenType.LINE_HEIGHT),
            DesignToken(name="opacity/half", value=0.5, type=TokenType.OPACITY),
        ]
        css = export_tokens(TokenCollection(tokens=tokens), _options("css")).files[0].content
        assert "--spacing-sm: 8px;" in css
        assert "--duration-fast: 150ms;" in css
        assert "--line-height-body: 1.5;" in css
        assert "--opacity-half: 0.5;" in css

    def test_reference_becomes_var(self):
        token = DesignToken(
            name="colors/primary", value="{colors.blue}", type=TokenType.COLOR, reference="colors/blue"
        )
        css = export_tokens(TokenCollection(tokens=[token]), _options("css")).files[0].content
        assert "--colors-primary: var(--colors-blue);" in css

    def test_grouping_sorted_by_category_with_docs(self, mixed_collection):
        css = export_tokens(mixed_collection, _options("css", generate_docs=True)).files[0].content
        headers = re.findall(r"/\* ([\w-]+) \*/", css)
        assert headers == sorted(headers)
        assert "/* Brand blue */" in css

    def test_collection_order_without_grouping(self, mixed_collection):
        css = export_tokens(mixed_collection, _options("css", group_by_category=False)).files[0].content
        names = re.findall(r"(--[\w-]+):", css)
        assert names[0] == "--colors-primary"
        assert names[-1] == "--shadow-card"
        assert "/*" not in css


class TestTailwindExport:
    def test_two_files(self, mixed_collection):
        files = export_tokens(mixed_collection, _options("tailwind")).files
        assert [f.path for f in files] == ["tailwind.tokens.js", "tailwind.tokens.mjs"]
        assert files[0].content.startswith("/** @type")
        assert "module.exports" in files[0].content
        assert "export default tokens;" in files[1].content

    def test_theme_shape(self, mixed_collection):
        theme = build_theme(mixed_collection.tokens, _options())
        assert list(theme) == ["colors", "spacing", "fontSize", "fontFamily", "borderRadius", "boxShadow"]
        assert theme["colors"]["colors"]["gray"]["900"] == "#111827"
        assert theme["spacing"] == {"sm": "8px", "md": "16px"}
        assert theme["fontFamily"]["sans"] == ["Inter", "sans-serif"]
        assert theme["boxShadow"]["card"] == "0 1px 2px rgba(0, 0, 0, 0.1)"

    def test_flat_colors_without_grouping(self, mixed_collection):
        theme = build_theme(mixed_collection.tokens, _options(group_by_category=False))
        assert theme["colors"]["colors-gray-900"] == "#111827"

    def test_only_populated_keys(self):
        theme = build_theme([DesignToken(name="w", value=700, type=TokenType.FONT_WEIGHT)], _options())
        assert theme == {"fontWeight": {"w": 700}}


class TestTypeScriptExport:
    def test_buckets_and_theme(self, mixed_collection):
        ts = export_tokens(mixed_collection, _options("typescript")).files[0].content

        assert "export const colors = {" in ts
        assert "export const spacing = {" in ts
        assert "export const shadows = {" in ts
        assert "export const theme = {" in ts
        assert "export type Theme = typeof theme;" in ts
        assert "export type ColorsToken = keyof typeof colors;" in ts
        assert "Generated" not in ts

    def test_nested_spacing_with_px(self, mixed_collection):
        ts = export_tokens(mixed_collection, _options("typescript")).files[0].content
        assert "  spacing: {\n    sm: '8px',\n    md: '16px',\n  }," in ts

    def test_flat_keys_use_last_segment(self):
        tokens = [DesignToken(name="font-family/sans", value="Inter", type=TokenType.FONT_FAMILY)]
        ts = export_tokens(TokenCollection(tokens=tokens), _options("typescript")).files[0].content
        assert "  sans: 'Inter'," in ts

    def test_without_type_definitions(self, mixed_collection):
        options = _options("typescript", include_type_definitions=False)
        ts = export_tokens(mixed_collection, options).files[0].content
        assert "keyof typeof" not in ts

    def test_namespace(self, mixed_collection):
        ts = export_tokens(mixed_collection, _options("typescript", ts_namespace="DS")).files[0].content
        assert "export namespace DS {" in ts
        assert ts.rstrip().endswith("}")

    def test_key_quoting(self):
        assert sanitize_key("primary") == "primary"
        assert sanitize_key("500") == "'500'"
        assert sanitize_key("gray-100") == "'gray-100'"

    def test_string_escaping(self):
        token = DesignToken(name="font-family/serif", value="Georgia, 'Times'", type=TokenType.FONT_FAMILY)
        ts = export_tokens(TokenCollection(tokens=[token]), _options("typescript")).files[0].content
        assert "serif: 'Georgia, \\'Times\\''," in ts


class TestSetPath:
    def test_scalar_collision_becomes_default(self):
        tree: dict = {}
        set_path(tree, ["colors", "primary"], "#000")
        set_path(tree, ["colors", "primary", "dark"], "#111")
        assert tree == {"colors": {"primary": {"DEFAULT": "#000", "dark": "#111"}}}

    def test_child_first_keeps_both(self):
        tree: dict = {}
        set_path(tree, ["colors", "primary", "dark"], "#111")
        set_path(tree, ["colors", "primary"], "#000")
        assert tree == {"colors": {"primary": {"dark": "#111", "DEFAULT": "#000"}}}

    def test_object_leaves_are_not_descended_into(self):
        def is_leaf(node):
            return "value" in node

        tree: dict = {}
        set_path(tree, ["a"], {"value": 1}, is_leaf)
        set_path(tree, ["a", "b"], {"value": 2}, is_leaf)
        assert tree == {"a": {"DEFAULT": {"value": 1}, "b": {"value": 2}}}


PREFIX_TOKENS = [
    DesignToken(name="colors/primary", value="#3B82F6", type=TokenType.COLOR),
    DesignToken(name="colors/primary/dark", value="#1E40AF", type=TokenType.COLOR),
    DesignToken(name="spacing/md", value=8, type=TokenType.SPACING),
    DesignToken(name="spacing/md/tight", value=4, type=TokenType.SPACING),
]

both_orders = pytest.mark.parametrize(
    "order", [PREFIX_TOKENS, PREFIX_TOKENS[::-1]], ids=["parent-first", "child-first"]
)


def _triples(tokens):
    return {(t.name, t.type, t.value) for t in tokens}


class TestPrefixNames:
    @pytest.mark.parametrize("format", ["style-dictionary", "w3c-dtcg"])
    @both_orders
    def test_round_trip(self, format, order):
        content = export_tokens(TokenCollection(tokens=order), _options(format)).files[0].content
        assert _triples(import_tokens(content).tokens) == _triples(PREFIX_TOKENS)

    def test_w3c_groups_never_carry_a_value(self):
        collection = TokenCollection(tokens=PREFIX_TOKENS)
        content = export_tokens(collection, _options("w3c-dtcg")).files[0].content
        primary = json.loads(content)["colors"]["primary"]
        assert "$value" not in primary
        assert primary["DEFAULT"]["$value"] == "#3B82F6"
        assert primary["dark"]["$value"] == "#1E40AF"

    @both_orders
    def test_typescript_default_key(self, order):
        ts = export_tokens(TokenCollection(tokens=order), _options("typescript")).files[0].content
        assert "DEFAULT: '8px'," in ts
        assert "tight: '4px'," in ts
        assert "DEFAULT: '#3B82F6'," in ts
        assert "dark: '#1E40AF'," in ts

    @both_orders
    def test_tailwind_default_key(self, order):
        theme = build_theme(order, _options())
        assert theme["colors"]["colors"]["primary"] == {"DEFAULT": "#3B82F6", "dark": "#1E40AF"}


class TestOtherType:
    TOKENS = [
        DesignToken(name="brand/x", value=8, type=TokenType.OTHER),
        DesignToken(name="brand/y", value="#fff", type=TokenType.OTHER),
    ]

    @pytest.mark.parametrize(
        ("format", "type_key", "written"),
        [("style-dictionary", "type", "other"), ("w3c-dtcg", "$type", "string")],
    )
    def test_type_is_written_and_read_back(self, format, type_key, written):
        collection = TokenCollection(tokens=self.TOKENS)
        content = export_tokens(collection, _options(format)).files[0].content

        assert json.loads(content)["brand"]["x"][type_key] == written
        assert _triples(import_tokens(content).tokens) == _triples(self.TOKENS)
