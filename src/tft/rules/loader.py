"""Rule file loader.

Loads the YAML rule file that names and cites the reset and exclusion
categories, for display next to calculation results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class Category:
    id: str
    label: str
    citation: str = ""


@dataclass
class RuleBook:
    rule_id: str = ""
    name: str = ""
    reset_types: dict[str, Category] = field(default_factory=dict)
    exclusion_types: dict[str, Category] = field(default_factory=dict)
    citations: dict[str, str] = field(default_factory=dict)

    def reset_label(self, type_id: str) -> str:
        """Display label for a reset category; unknown ids are shown as-is."""
        category = self.reset_types.get(type_id)
        return category.label if category else type_id

    def exclusion_label(self, type_id: str) -> str:
        category = self.exclusion_types.get(type_id)
        return category.label if category else type_id


def load_rule(rules_dir: str | Path, name: str) -> dict:
    """Load a rule YAML file."""
    path = Path(rules_dir) / f"{name}.yaml"
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _categories(entries: list[dict]) -> dict[str, Category]:
    categories: dict[str, Category] = {}
    for entry in entries:
        type_id = entry.get("id", "")
        if not type_id:
            continue
        categories[type_id] = Category(
            id=type_id,
            label=entry.get("label", type_id),
            citation=entry.get("citation", ""),
        )
    return categories


def load_rule_book(rules_dir: str | Path, name: str) -> RuleBook:
    """Build a RuleBook from a rule file. A missing file gives an empty book."""
    data = load_rule(rules_dir, name)
    rule = data.get("rule", {})
    book = RuleBook(
        rule_id=rule.get("id", name),
        name=rule.get("name", name),
        reset_types=_categories(data.get("reset_types", [])),
        exclusion_types=_categories(data.get("exclusion_types", [])),
    )

    for limit in data.get("time_limits", []):
        if limit.get("id") and limit.get("citation"):
            book.citations[limit["id"]] = limit["citation"]
    cure = data.get("cure_period")
    if cure and cure.get("citation"):
        book.citations["cure-period"] = cure["citation"]
    if rule.get("court_day_rule"):
        book.citations["court-day"] = rule["court_day_rule"]

    return book
