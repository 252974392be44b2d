"""Shared fixtures for TokenBridge unit tests."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest

from tokenbridge.core.ir import DesignToken, TokenCollection, TokenType
from tokenbridge.core.mapping import use_token_map

SCENARIO_A_CSV = "name,value,type\ncolors/primary,#3B82F6,color\nspacing/sm,8,spacing"

SCENARIO_B_JSON = json.dumps(
    {
        "color": {"text": {"value": "#000000", "type": "color"}},
        "color-bg": {"value": "#FFFFFF", "type": "color"},
    }
)


@pytest.fixture
def scenario_a_csv() -> str:
    return SCENARIO_A_CSV


@pytest.fixture
def scenario_b_json() -> str:
    return SCENARIO_B_JSON


@pytest.fixture
def style_dictionary_json() -> str:
    return json.dumps(
        {
            "colors": {
                "primary": {"value": "#3B82F6", "type": "color", "comment": "Brand blue"},
                "secondary": {"value": "#64748B", "type": "color"},
            },
            "spacing": {"sm": {"value": 8, "type": "size"}, "md": {"value": 16, "type": "size"}},
            "font-size": {"body": {"value": 16, "type": "size"}},
            "duration": {"fast": {"value": 150, "type": "time"}},
        }
    )


@pytest.fixture
def w3c_json() -> str:
    return json.dumps(
        {
            "$schema": "https://design-tokens.github.io/community-group/format/",
            "colors": {
                "$type": "color",
                "primary": {"$value": "#3B82F6", "$description": "Brand"},
                "surface": {"$value": "#FFFFFF", "$extensions": {"com.example.mode": "light"}},
            },
            "spacing": {"sm": {"$value": "8px", "$type": "dimension"}},
            "line-height": {"body": {"$value": 1.5, "$type": "number"}},
        }
    )


@pytest.fixture
def token_studio_json() -> str:
    return json.dumps(
        {
            "global": {
                "colors": {
                    "blue": {"value": "#3B82F6", "type": "color"},
                    "primary": {"value": "{colors.blue}", "type": "color"},
                },
                "spacing": {"sm": {"value": "8", "type": "spacing"}},
                "shadow": {"card": {"value": "0 1px 2px #0000001a", "type": "boxShadow"}},
            }
        }
    )


@pytest.fixture
def figma_variables_json() -> str:
    return json.dumps(
        {
            "Brand Colors": {
                "Primary 500": {
                    "$type": "color",
                    "$value": {"colorSpace": "srgb", "components": [0, 0, 1], "alpha": 1, "hex": "#0000FF"},
                    "$extensions": {"com.figma.variableId": "VariableID:1:2"},
                },
                "Overlay": {
                    "$type": "color",
                    "$value": {"hex": "#000000", "alpha": 0.5},
                },
            },
            "Spacing": {"Small": {"$type": "number", "$value": 8}},
        }
    )


@pytest.fixture
def color_collection() -> TokenCollection:
    return TokenCollection(
        name="Brand",
        tokens=[
            DesignToken(name="colors/primary", value="#3B82F6", type=TokenType.COLOR),
            DesignToken(name="colors/text", value="#111827", type=TokenType.COLOR),
            DesignToken(name="colors/background", value="#FFFFFF", type=TokenType.COLOR),
        ],
    )


@pytest.fixture
def mixed_collection() -> TokenCollection:
    return TokenCollection(
        name="Design System",
        version="2.1.0",
        tokens=[
            DesignToken(
                name="colors/primary",
                value="#3B82F6",
                type=TokenType.COLOR,
                category="colors",
                description="Brand blue",
            ),
            DesignToken(name="colors/gray/900", value="#111827", type=TokenType.COLOR, category="colors"),
            DesignToken(name="spacing/sm", value=8, type=TokenType.SPACING, category="spacing"),
            DesignToken(name="spacing/md", value=16, type=TokenType.SPACING, category="spacing"),
            DesignToken(name="font-size/body", value=16, type=TokenType.FONT_SIZE, category="font-size"),
            DesignToken(
                name="font-family/sans",
                value="Inter, sans-serif",
                type=TokenType.FONT_FAMILY,
                category="font-family",
            ),
            DesignToken(name="radius/md", value=4, type=TokenType.BORDER_RADIUS, category="radius"),
            DesignToken(
                name="shadow/card",
                value="0 1px 2px rgba(0, 0, 0, 0.1)",
                type=TokenType.SHADOW,
                category="shadow",
            ),
        ],
    )


@pytest.fixture(autouse=True)
def _reset_token_map() -> Iterator[None]:
    yield
    use_token_map(None)
