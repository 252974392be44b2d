"""Tests for the format importers and import orchestration."""

from __future__ import annotations

import json

import pytest

from tokenbridge.core.errors import TokenFormatError
from tokenbridge.core.importers import import_tokens, import_tokens_with_report
from tokenbridge.core.importers.csv_import import coerce_value, parse_csv
from tokenbridge.core.importers.figma_variables import (
    FigmaColorValue,
    figma_color_to_css,
    sanitize_token_name,
)
from tokenbridge.core.importers.token_studio import parse_reference
from tokenbridge.core.ir import (
    DEFAULT_COLLECTION_NAME,
    DesignToken,
    ImportMode,
    ImportOptions,
    TokenCollection,
    TokenSource,
    TokenType,
)
from tokenbridge.core.validator import validate_tokens


def _by_name(collection: TokenCollection) -> dict[str, DesignToken]:
    return {t.name: t for t in collection.tokens}


# =============================================================================
# CSV
# =============================================================================


class TestCsvImport:
    def test_scenario_a(self, scenario_a_csv):
        collection = import_tokens(scenario_a_csv, ImportOptions(mode=ImportMode.REPLACE))

        assert len(collection.tokens) == 2
        tokens = _by_name(collection)
        assert tokens["colors/primary"].value == "#3B82F6"
        assert tokens["colors/primary"].type == TokenType.COLOR
        assert tokens["spacing/sm"].value == 8
        assert tokens["spacing/sm"].type == TokenType.SPACING

        result = validate_tokens(collection)
        assert result.valid is True
        assert result.errors == []

    def test_quoted_fields_with_commas(self):
        content = 'name,value,type\nfont-family/sans,"Inter, sans-serif",fontFamily\n'
        parsed = parse_csv(content)
        assert parsed.tokens[0].value == "Inter, sans-serif"
        assert parsed.tokens[0].type == TokenType.FONT_FAMILY

    def test_optional_columns(self):
        content = "name,value,category,description\nbrand,#fff,core,Page background\n"
        token = parse_csv(content).tokens[0]
        assert token.category == "core"
        assert token.description == "Page background"
        assert token.type == TokenType.COLOR

    def test_category_from_path_when_column_missing(self, scenario_a_csv):
        tokens = parse_csv(scenario_a_csv).tokens
        assert [t.category for t in tokens] == ["colors", "spacing"]

    def test_rows_missing_value_become_warnings(self):
        content = "name,value\ncolors/primary,#000\ncolors/empty,\n,#fff\n"
        report = import_tokens_with_report(content, ImportOptions(file_name="t.csv"))

        assert [t.name for t in report.collection.tokens] == ["colors/primary"]
        assert [w.row for w in report.warnings] == [3, 4]

    def test_unknown_type_is_row_warning(self):
        content = "name,value,type\na,1,spacing\nb,2,wobble\n"
        parsed = parse_csv(content)
        assert [t.name for t in parsed.tokens] == ["a"]
        assert "wobble" in parsed.warnings[0].message

    def test_zero_valid_rows_is_format_error(self):
        with pytest.raises(TokenFormatError, match="no valid token rows"):
            import_tokens("name,value\n,\n", ImportOptions(file_name="t.csv"))

    def test_missing_required_header(self):
        with pytest.raises(TokenFormatError, match="name"):
            parse_csv("label,color\nprimary,#fff\n")

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("8", 8), ("-4", -4), ("1.5", 1.5), ("8px", "8px"), ("#123", "#123")],
    )
    def test_coerce_value(self, raw, expected):
        assert coerce_value(raw) == expected


# =============================================================================
# Style Dictionary
# =============================================================================


class TestStyleDictionaryImport:
    def test_scenario_b_nesting(self, scenario_b_json):
        collection = import_tokens(scenario_b_json)
        tokens = _by_name(collection)

        assert collection.metadata.source == TokenSource.STYLE_DICTIONARY
        assert set(tokens) == {"color/text", "color-bg"}
        assert tokens["color/text"].path == ["color", "text"]
        assert tokens["color-bg"].path == ["color-bg"]

    def test_types_and_descriptions(self, style_dictionary_json):
        tokens = _by_name(import_tokens(style_dictionary_json))

        assert tokens["colors/primary"].type == TokenType.COLOR
        assert tokens["colors/primary"].description == "Brand blue"
        assert tokens["spacing/sm"].type == TokenType.SPACING
        assert tokens["font-size/body"].type == TokenType.FONT_SIZE
        assert tokens["duration/fast"].type == TokenType.DURATION

    def test_size_without_name_hint_is_dimension(self):
        content = json.dumps({"misc": {"thing": {"value": 3, "type": "size"}}})
        assert import_tokens(content).tokens[0].type == TokenType.DIMENSION

    @pytest.mark.parametrize("bad", [True, None, [1, 2]])
    def test_non_scalar_value_rejected(self, bad):
        content = json.dumps({"colors": {"x": {"value": bad, "type": "color"}}})
        with pytest.raises(TokenFormatError, match="colors/x"):
            import_tokens(content)


# =============================================================================
# W3C DTCG
# =============================================================================


class TestW3CImport:
    def test_group_type_is_inherited(self, w3c_json):
        tokens = _by_name(import_tokens(w3c_json))
        assert tokens["colors/primary"].type == TokenType.COLOR
        assert tokens["colors/primary"].description == "Brand"

    def test_extensions_preserved(self, w3c_json):
        tokens = _by_name(import_tokens(w3c_json))
        assert tokens["colors/surface"].extensions == {"com.example.mode": "light"}

    def test_dimension_and_number_refined_by_name(self, w3c_json):
        tokens = _by_name(import_tokens(w3c_json))
        assert tokens["spacing/sm"].type == TokenType.SPACING
        assert tokens["spacing/sm"].value == "8px"
        assert tokens["line-height/body"].type == TokenType.LINE_HEIGHT

    def test_missing_value_key_shape_rejected(self):
        content = json.dumps({"a": {"$value": {"nested": 1}, "$type": "color"}})
        with pytest.raises(TokenFormatError):
            import_tokens(content)


# =============================================================================
# Token Studio
# =============================================================================


class TestTokenStudioImport:
    def test_theme_set_prefix_kept(self, token_studio_json):
        collection = import_tokens(token_studio_json)
        assert collection.metadata.source == TokenSource.TOKEN_STUDIO
        assert "global/colors/blue" in collection.names()

    def test_references(self, token_studio_json):
        tokens = _by_name(import_tokens(token_studio_json))
        primary = tokens["global/colors/primary"]
        assert primary.reference == "colors/blue"
        assert primary.value == "{colors.blue}"

    def test_type_mapping(self, token_studio_json):
        tokens = _by_name(import_tokens(token_studio_json))
        assert tokens["global/spacing/sm"].type == TokenType.SPACING
        assert tokens["global/shadow/card"].type == TokenType.SHADOW

    def test_parse_reference(self):
        assert parse_reference("{a.b.c}") == "a/b/c"
        assert parse_reference("#fff") is None
        assert parse_reference(4) is None


# =============================================================================
# Figma Variables
# =============================================================================


class TestFigmaVariablesImport:
    def test_names_sanitized_and_colors_converted(self, figma_variables_json):
        tokens = _by_name(import_tokens(figma_variables_json))

        assert tokens["brand-colors/primary-500"].value == "#0000FF"
        assert tokens["brand-colors/overlay"].value == "rgba(0, 0, 0, 0.50)"
        assert tokens["spacing/small"].type == TokenType.SPACING
        assert tokens["spacing/small"].value == 8

    def test_default_collection_name_from_file(self, figma_variables_json):
        collection = import_tokens(
            figma_variables_json, ImportOptions(file_name="brand.tokens.json")
        )
        assert collection.name == "brand"

    def test_default_collection_name(self, figma_variables_json):
        assert import_tokens(figma_variables_json).name == "Figma Variables"

    def test_sanitize_token_name(self):
        assert sanitize_token_name("  Brand Colors/Primary (500) ") == "brand-colors/primary-500"

    def test_color_from_components(self):
        color = FigmaColorValue(components=[1.0, 0.5, 0.0])
        assert figma_color_to_css(color) == "rgb(255, 128, 0)"

    def test_empty_color_object(self):
        assert figma_color_to_css(FigmaColorValue()) == "#000000"

    def test_short_hex_with_alpha(self):
        color = FigmaColorValue(hex="#FFF", alpha=0.5)
        assert figma_color_to_css(color) == "rgba(255, 255, 255, 0.50)"

    def test_unparseable_hex_with_alpha_is_format_error(self):
        content = json.dumps({"c": {"$type": "color", "$value": {"hex": "#GG", "alpha": 0.5}}})
        with pytest.raises(TokenFormatError, match="Invalid Figma color hex"):
            import_tokens(content, ImportOptions(file_name="vars.json"))


# =============================================================================
# Manual
# =============================================================================


class TestManualImport:
    def test_token_list_document(self):
        content = json.dumps(
            {
                "name": "Saved",
                "version": "3.0.0",
                "tokens": [{"name": "colors/primary", "value": "#fff", "type": "color"}],
            }
        )
        collection = import_tokens(content)
        assert collection.name == "Saved"
        assert collection.version == "3.0.0"
        assert collection.tokens[0].category == "colors"

    def test_malformed_token_entry(self):
        content = json.dumps({"tokens": [{"name": "a", "value": 1, "type": "nonsense"}]})
        with pytest.raises(TokenFormatError, match=r"tokens\[0\]"):
            import_tokens(content)

    @pytest.mark.parametrize("value", [True, None, [1, 2]])
    def test_token_list_rejects_non_scalar_values(self, value):
        content = json.dumps({"tokens": [{"name": "flag", "value": value}]})
        with pytest.raises(TokenFormatError, match=r"tokens\[0\]"):
            import_tokens(content)

    def test_flat_map(self):
        tokens = _by_name(import_tokens(json.dumps({"primary": "#fff", "gap": 4})))
        assert tokens["primary"].type == TokenType.COLOR
        assert tokens["gap"].type == TokenType.SPACING

    def test_flat_map_rejects_lists(self):
        with pytest.raises(TokenFormatError, match="items"):
            import_tokens(json.dumps({"items": [1, 2]}))


# =============================================================================
# Orchestration
# =============================================================================


class TestImportOrchestration:
    def test_unknown_format_raises(self):
        with pytest.raises(TokenFormatError, match="Unknown token format"):
            import_tokens("definitely not tokens")

    def test_invalid_json_in_json_file(self):
        with pytest.raises(TokenFormatError):
            import_tokens("[1, 2", ImportOptions(file_name="tokens.json"))

    def test_name_precedence(self, style_dictionary_json):
        named = import_tokens(
            style_dictionary_json,
            ImportOptions(file_name="brand.json", collection_name="Override"),
        )
        assert named.name == "Override"

        from_file = import_tokens(style_dictionary_json, ImportOptions(file_name="brand.json"))
        assert from_file.name == "brand"

        assert import_tokens(style_dictionary_json).name == DEFAULT_COLLECTION_NAME

    def test_metadata(self, scenario_a_csv):
        report = import_tokens_with_report(
            scenario_a_csv,
            ImportOptions(file_name="tokens.csv"),
            clock=lambda: "2024-01-01T00:00:00Z",
        )
        metadata = report.collection.metadata
        assert metadata.source == TokenSource.CSV
        assert metadata.file_name == "tokens.csv"
        assert metadata.imported_at == "2024-01-01T00:00:00Z"

    def test_scenario_c_merge_incoming_wins(self):
        existing = import_tokens("name,value\nspacing/sm,4\ncolors/primary,#000\n")
        merged = import_tokens(
            "name,value\nspacing/sm,8\n",
            ImportOptions(mode=ImportMode.MERGE),
            existing=existing,
        )

        spacing = [t for t in merged.tokens if t.name == "spacing/sm"]
        assert len(spacing) == 1
        assert spacing[0].value == 8
        assert merged.names() == ["spacing/sm", "colors/primary"]

    def test_merge_keeps_existing_name_unless_overridden(self):
        existing = TokenCollection(name="Base", version="2.0.0", tokens=[])
        merged = import_tokens(
            "name,value\nspacing/sm,8\n",
            ImportOptions(mode=ImportMode.MERGE, file_name="extra.csv"),
            existing=existing,
        )
        assert merged.name == "Base"
        assert merged.version == "2.0.0"
        assert merged.metadata.file_name == "extra.csv"

        renamed = import_tokens(
            "name,value\nspacing/sm,8\n",
            ImportOptions(mode=ImportMode.MERGE, collection_name="Renamed"),
            existing=existing,
        )
        assert renamed.name == "Renamed"

    def test_replace_discards_existing(self, scenario_a_csv):
        existing = import_tokens("name,value\nold/token,1\n")
        replaced = import_tokens(scenario_a_csv, existing=existing)
        assert "old/token" not in replaced.names()

    def test_failed_import_leaves_existing_untouched(self):
        existing = import_tokens("name,value\nspacing/sm,4\n")
        with pytest.raises(TokenFormatError):
            import_tokens("{broken", ImportOptions(mode=ImportMode.MERGE), existing=existing)
        assert existing.tokens[0].value == 4
