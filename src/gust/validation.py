"""Validation rules for CssGenerationConfig.

Each rule is a function taking a config and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

import re
from typing import Callable

from gust.config import CATEGORY_TOGGLES, CssGenerationConfig
from gust.errors import ConfigurationError
from gust.model.diagnostic import Diagnostic, Severity
from gust.values.colors import PALETTE
from gust.variants.tokens import STATIC_VARIANT_NAMES

# Breakpoint names become class prefixes, so they must be plain identifiers.
_BREAKPOINT_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_MEDIA_QUERY_RE = re.compile(r"^\(.+\)$|^[a-z]+( and \(.+\))*$")


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_palette_names(config: CssGenerationConfig) -> list[Diagnostic]:
    """Every restricted palette must name a known color family."""
    diagnostics: list[Diagnostic] = []
    for name in config.color_palettes:
        if name not in PALETTE:
            diagnostics.append(
                Diagnostic(
                    rule="check_palette_names",
                    severity=Severity.ERROR,
                    message=f"Unknown color palette '{name}'.",
                    field="color_palettes",
                    fix="Use one of: " + ", ".join(sorted(PALETTE)) + ".",
                )
            )
    return diagnostics


def check_palettes_need_colors(config: CssGenerationConfig) -> list[Diagnostic]:
    """A palette restriction is meaningless when color utilities are disabled."""
    if config.color_palettes and not config.include_colors:
        return [
            Diagnostic(
                rule="check_palettes_need_colors",
                severity=Severity.ERROR,
                message="color_palettes is set but include_colors is False.",
                field="color_palettes",
                fix="Enable include_colors or clear color_palettes.",
            )
        ]
    return []


def check_breakpoints_need_responsive(config: CssGenerationConfig) -> list[Diagnostic]:
    """Custom breakpoints conflict with disabled responsive variants."""
    if config.custom_breakpoints and not config.include_responsive:
        return [
            Diagnostic(
                rule="check_breakpoints_need_responsive",
                severity=Severity.ERROR,
                message="custom_breakpoints is set but include_responsive is False.",
                field="custom_breakpoints",
                fix="Enable include_responsive or clear custom_breakpoints.",
            )
        ]
    return []


def check_breakpoint_syntax(config: CssGenerationConfig) -> list[Diagnostic]:
    """Breakpoint names must be identifiers and queries must look like media queries."""
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()
    for entry in config.custom_breakpoints:
        if len(entry) != 2:
            diagnostics.append(
                Diagnostic(
                    rule="check_breakpoint_syntax",
                    severity=Severity.ERROR,
                    message=f"Breakpoint entry {entry!r} is not a (name, query) pair.",
                    field="custom_breakpoints",
                )
            )
            continue
        name, query = entry
        if not _BREAKPOINT_NAME_RE.match(name):
            diagnostics.append(
                Diagnostic(
                    rule="check_breakpoint_syntax",
                    severity=Severity.ERROR,
                    message=f"Breakpoint name '{name}' is not a valid class prefix.",
                    field="custom_breakpoints",
                    fix="Use lowercase letters, digits and dashes.",
                )
            )
        if not _MEDIA_QUERY_RE.match(query.strip()):
            diagnostics.append(
                Diagnostic(
                    rule="check_breakpoint_syntax",
                    severity=Severity.ERROR,
                    message=f"Breakpoint '{name}' has an invalid media query {query!r}.",
                    field="custom_breakpoints",
                    fix="Write the query in parentheses, e.g. '(min-width: 640px)'.",
                )
            )
        if name in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_breakpoint_syntax",
                    severity=Severity.ERROR,
                    message=f"Breakpoint '{name}' is defined more than once.",
                    field="custom_breakpoints",
                )
            )
        seen.add(name)
    return diagnostics


def check_breakpoint_shadowing(config: CssGenerationConfig) -> list[Diagnostic]:
    """A breakpoint must not reuse the name of another variant."""
    diagnostics: list[Diagnostic] = []
    for entry in config.custom_breakpoints:
        if len(entry) == 2 and entry[0] in STATIC_VARIANT_NAMES:
            diagnostics.append(
                Diagnostic(
                    rule="check_breakpoint_shadowing",
                    severity=Severity.ERROR,
                    message=f"Breakpoint '{entry[0]}' shadows the '{entry[0]}:' variant.",
                    field="custom_breakpoints",
                    fix="Pick a name that is not already a variant.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_any_category_enabled(config: CssGenerationConfig) -> list[Diagnostic]:
    """With every category off, no class can ever be recognized."""
    if not any(getattr(config, toggle) for toggle in CATEGORY_TOGGLES.values()):
        return [
            Diagnostic(
                rule="check_any_category_enabled",
                severity=Severity.WARNING,
                message="Every utility category is disabled; no class will be recognized.",
                fix="Enable at least one include_* category toggle.",
            )
        ]
    return []


def check_source_maps_minify(config: CssGenerationConfig) -> list[Diagnostic]:
    """Minified output never carries origin comments."""
    if config.source_maps and config.minify:
        return [
            Diagnostic(
                rule="check_source_maps_minify",
                severity=Severity.INFO,
                message="source_maps has no effect on minified output.",
                field="source_maps",
            )
        ]
    return []


ALL_RULES = [
    check_palette_names,
    check_palettes_need_colors,
    check_breakpoints_need_responsive,
    check_breakpoint_syntax,
    check_breakpoint_shadowing,
    check_any_category_enabled,
    check_source_maps_minify,
]

RuleFunc = Callable[[CssGenerationConfig], list[Diagnostic]]


def validate(
    config: CssGenerationConfig, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all validation rules against *config*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(config))
    return diagnostics


def validate_or_raise(
    config: CssGenerationConfig, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ConfigurationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(config, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ConfigurationError(errors)
    return diagnostics
