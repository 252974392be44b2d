"""
Design token validation.

Every rule is an independent function over the token list; all rules always
run and their issues are sorted into errors, warnings and info by severity.
Validation is read-only and never raises for a finding.

Rules:
- Naming: duplicates, empty names, spaces, mixed casing, cross-token pattern
  consistency
- Color format validity
- Numeric ranges (negative sizes, opacity outside 0..1)
- Semantic layer completeness (heuristic suggestions)
- WCAG contrast between text-like and background-like colors
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from .color import check_contrast, is_short_hex, is_valid_color_format
from .ir import (
    DesignToken,
    TokenCollection,
    TokenType,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)

Rule = Callable[[Sequence[DesignToken]], list[ValidationIssue]]

# Naming patterns, in classification order
SLASH_SEPARATED = "slash-separated"
DOT_SEPARATED = "dot-separated"
KEBAB_CASE = "kebab-case"
CAMEL_CASE = "camelCase"
OTHER_PATTERN = "other"

MAX_INCONSISTENT_NAMES = 5

NEGATIVE_CHECK_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.SPACING, TokenType.BORDER_RADIUS, TokenType.FONT_SIZE}
)

PRIMITIVE_COLOR_WORDS: tuple[str, ...] = ("blue", "red", "green")
SEMANTIC_COLOR_WORDS: tuple[str, ...] = ("primary", "secondary", "error", "success", "warning")
MIN_SPACING_SCALE = 5

TEXT_COLOR_WORDS: tuple[str, ...] = ("text", "foreground", "on-")
BACKGROUND_COLOR_WORDS: tuple[str, ...] = ("background", "surface", "bg")

_CAMEL_RE = re.compile(r"[a-z][A-Z]")
_NUMERIC_SUFFIX_RE = re.compile(r"\d{2,3}$")
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def _issue(
    severity: ValidationSeverity,
    code: str,
    message: str,
    token_names: list[str] | None = None,
    suggestion: str | None = None,
) -> ValidationIssue:
    return ValidationIssue(
        severity=severity,
        code=code,
        message=message,
        token_names=token_names,
        suggestion=suggestion,
    )


def _numeric(value: str | int | float) -> float | None:
    """Numeric reading of a value (``"-4px"`` -> -4.0), or None."""
    if isinstance(value, int | float):
        return float(value)
    match = _LEADING_NUMBER_RE.match(value)
    return float(match.group(1)) if match else None


# =============================================================================
# Naming
# =============================================================================


def validate_naming(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    """Per-token naming checks: uniqueness, emptiness, spaces, casing."""
    issues: list[ValidationIssue] = []
    seen: set[str] = set()

    for token in tokens:
        if token.name in seen:
            issues.append(
                _issue(
                    ValidationSeverity.ERROR,
                    "DUPLICATE_NAME",
                    f'Duplicate token name: "{token.name}"',
                    [token.name],
                    "Each token must have a unique name",
                )
            )
        seen.add(token.name)

        if not token.name.strip():
            issues.append(
                _issue(
                    ValidationSeverity.ERROR,
                    "EMPTY_NAME",
                    "Token has empty name",
                    [token.name],
                    "Provide a descriptive name for the token",
                )
            )
            continue

        if " " in token.name:
            issues.append(
                _issue(
                    ValidationSeverity.ERROR,
                    "SPACE_IN_NAME",
                    f'Token name contains spaces: "{token.name}"',
                    [token.name],
                    'Use "/" or "-" instead of spaces (e.g., "color/primary" or "color-primary")',
                )
            )

        if any(c.isupper() for c in token.name) and "-" in token.name:
            issues.append(
                _issue(
                    ValidationSeverity.WARNING,
                    "MIXED_CASING",
                    f'Token name has mixed casing: "{token.name}"',
                    [token.name],
                    "Use consistent casing: either kebab-case or camelCase",
                )
            )

    return issues


def classify_name(name: str) -> str:
    """Naming pattern of a single token name."""
    if "/" in name:
        return SLASH_SEPARATED
    if "." in name:
        return DOT_SEPARATED
    if "-" in name:
        return KEBAB_CASE
    if _CAMEL_RE.search(name):
        return CAMEL_CASE
    return OTHER_PATTERN


def validate_naming_consistency(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    """Flag names that do not follow the dominant naming pattern."""
    counts: dict[str, int] = {
        SLASH_SEPARATED: 0,
        DOT_SEPARATED: 0,
        KEBAB_CASE: 0,
        CAMEL_CASE: 0,
        OTHER_PATTERN: 0,
    }
    patterns: dict[str, str] = {}
    for token in tokens:
        pattern = classify_name(token.name)
        counts[pattern] += 1
        patterns[token.name] = pattern

    dominant = SLASH_SEPARATED
    best = 0
    for pattern, count in counts.items():
        if count > best:
            best = count
            dominant = pattern

    offenders = [
        name
        for name, pattern in patterns.items()
        if pattern != dominant and pattern != OTHER_PATTERN
    ][:MAX_INCONSISTENT_NAMES]
    if not offenders:
        return []

    return [
        _issue(
            ValidationSeverity.WARNING,
            "INCONSISTENT_NAMING",
            f"Inconsistent naming patterns detected: {', '.join(offenders)}",
            offenders,
            f"Most tokens use {dominant}. Consider standardizing.",
        )
    ]


# =============================================================================
# Values
# =============================================================================


def validate_color_formats(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for token in tokens:
        if token.type != TokenType.COLOR:
            continue
        value = str(token.value)

        if not is_valid_color_format(value):
            issues.append(
                _issue(
                    ValidationSeverity.WARNING,
                    "INVALID_COLOR_FORMAT",
                    f'Invalid color format for "{token.name}": {value}',
                    [token.name],
                    "Use hex (#RRGGBB), rgb(r, g, b), or hsl(h, s%, l%) format",
                )
            )

        if is_short_hex(value):
            issues.append(
                _issue(
                    ValidationSeverity.INFO,
                    "SHORT_HEX",
                    f'Consider using 6-digit hex for "{token.name}"',
                    [token.name],
                    "Use #RRGGBB instead of #RGB for better compatibility",
                )
            )
    return issues


def validate_numeric_values(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for token in tokens:
        if token.type in NEGATIVE_CHECK_TYPES:
            number = _numeric(token.value)
            if number is not None and number < 0:
                issues.append(
                    _issue(
                        ValidationSeverity.WARNING,
                        "NEGATIVE_VALUE",
                        f'Negative value for "{token.name}": {token.value}',
                        [token.name],
                        f"{token.type.value} values should typically be positive",
                    )
                )

        elif token.type == TokenType.OPACITY:
            number = _numeric(token.value)
            if number is not None and not 0 <= number <= 1:
                issues.append(
                    _issue(
                        ValidationSeverity.WARNING,
                        "OPACITY_OUT_OF_RANGE",
                        f'Opacity out of range for "{token.name}": {token.value}',
                        [token.name],
                        "Opacity should be between 0 and 1",
                    )
                )
    return issues


# =============================================================================
# Completeness
# =============================================================================


def suggest_semantic_layers(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    color_names = [t.name for t in tokens if t.type == TokenType.COLOR]

    has_semantic = any(
        word in name.lower() for name in color_names for word in SEMANTIC_COLOR_WORDS
    )
    has_primitive = any(
        any(word in name.lower() for word in PRIMITIVE_COLOR_WORDS)
        or _NUMERIC_SUFFIX_RE.search(name)
        for name in color_names
    )
    if has_primitive and not has_semantic:
        issues.append(
            _issue(
                ValidationSeverity.INFO,
                "MISSING_SEMANTIC_COLORS",
                "Consider adding semantic color tokens",
                suggestion=(
                    'Add tokens like "primary", "secondary", "error", "success" '
                    "that reference your primitive colors"
                ),
            )
        )

    spacing_count = sum(1 for t in tokens if t.type == TokenType.SPACING)
    if 0 < spacing_count < MIN_SPACING_SCALE:
        issues.append(
            _issue(
                ValidationSeverity.INFO,
                "INCOMPLETE_SPACING_SCALE",
                f"Only {spacing_count} spacing tokens defined",
                suggestion="Consider a more complete spacing scale (xs, sm, md, lg, xl, 2xl, etc.)",
            )
        )
    return issues


# =============================================================================
# WCAG contrast
# =============================================================================


def _name_has(token: DesignToken, words: tuple[str, ...]) -> bool:
    name = token.name.lower()
    return any(word in name for word in words)


def validate_color_contrast(tokens: Sequence[DesignToken]) -> list[ValidationIssue]:
    """Check every text-like x background-like color pair against WCAG AA."""
    colors = [t for t in tokens if t.type == TokenType.COLOR]
    if len(colors) < 2:
        return []

    text_colors = [t for t in colors if _name_has(t, TEXT_COLOR_WORDS)]
    bg_colors = [t for t in colors if _name_has(t, BACKGROUND_COLOR_WORDS)]

    issues: list[ValidationIssue] = []
    for text in text_colors:
        for bg in bg_colors:
            if text is bg:
                continue
            result = check_contrast(str(text.value), str(bg.value))
            if result is None or result.passes_aa:
                continue
            issues.append(
                _issue(
                    ValidationSeverity.WARNING,
                    "LOW_CONTRAST",
                    f'Low contrast between "{text.name}" and "{bg.name}" ({result.ratio:.2f}:1)',
                    [text.name, bg.name],
                    f"WCAG AA requires 4.5:1 for normal text. Current ratio: {result.ratio:.2f}:1",
                )
            )
    return issues


# =============================================================================
# Entry points
# =============================================================================

VALIDATION_RULES: list[Rule] = [
    validate_naming,
    validate_naming_consistency,
    validate_color_formats,
    validate_numeric_values,
    suggest_semantic_layers,
    validate_color_contrast,
]


def validate_tokens(collection: TokenCollection) -> ValidationResult:
    """Validate a token collection.

    Args:
        collection: Collection to validate (not modified).

    Returns:
        ValidationResult; ``valid`` is True iff there are no errors.
    """
    tokens = list(collection.tokens)
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    info: list[ValidationIssue] = []

    buckets = {
        ValidationSeverity.ERROR: errors,
        ValidationSeverity.WARNING: warnings,
        ValidationSeverity.INFO: info,
    }
    for rule in VALIDATION_RULES:
        for issue in rule(tokens):
            buckets[issue.severity].append(issue)

    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        info=info,
        token_count=len(tokens),
    )


def is_valid(collection: TokenCollection) -> bool:
    """True if the collection has no validation errors."""
    return validate_tokens(collection).valid


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def get_validation_summary(result: ValidationResult) -> str:
    """One-line summary, e.g. ``"1 error, 2 warnings, 1 suggestion"``."""
    parts: list[str] = []
    if result.errors:
        parts.append(_plural(len(result.errors), "error"))
    if result.warnings:
        parts.append(_plural(len(result.warnings), "warning"))
    if result.info:
        parts.append(_plural(len(result.info), "suggestion"))
    return ", ".join(parts) if parts else "All tokens valid"
