"""Built-in WCAG accessibility rules."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from accesshtml.rules.base import Rule

# Built-in rule modules, in evaluation order.
_RULE_MODULES = (
    "img_alt",
    "form_label",
    "link_name",
    "heading_order",
    "color_contrast",
    "aria_valid",
)

_RULES: list[type] = []
_all_registered: bool = False


def register_rule(cls: type) -> type:
    """Class decorator that adds a rule to the default rule set."""
    if cls not in _RULES:
        _RULES.append(cls)
    return cls


def _register_all() -> None:
    """Import all rule modules to trigger @register_rule.

    Called lazily so that importing one rule module does not pull in the rest.
    """
    for name in _RULE_MODULES:
        importlib.import_module(f"{__name__}.{name}")


def _evaluation_index(cls: type) -> int:
    module = cls.__module__.rpartition(".")[2]
    if module in _RULE_MODULES:
        return _RULE_MODULES.index(module)
    return len(_RULE_MODULES)


def default_rules() -> list[Rule]:
    """Return a fresh instance of every built-in rule, in evaluation order."""
    global _all_registered
    if not _all_registered:
        _register_all()
        _all_registered = True
    return [cls() for cls in sorted(_RULES, key=_evaluation_index)]
