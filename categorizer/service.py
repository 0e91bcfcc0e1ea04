# categorizer/service.py
"""
Categorizer service: the rule table, optionally loaded from YAML.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml

from categorizer.rules import (
    DEFAULT_CATEGORY,
    DEFAULT_RULES,
    CategoryRule,
    categorize,
    compile_rules,
)

log = logging.getLogger(__name__)


class CategorizerService:
    """Categorize transactions using an ordered keyword table."""

    def __init__(self, rules_path: Optional[str] = None):
        self.rules: Tuple[CategoryRule, ...] = DEFAULT_RULES
        self.default = DEFAULT_CATEGORY
        if rules_path:
            p = Path(rules_path)
            if p.exists():
                with open(p, "r", encoding="utf-8") as f:
                    cfg = yaml.safe_load(f) or {}
                compiled = compile_rules(cfg)
                if compiled:
                    self.rules = compiled
                else:
                    log.warning("No usable rules in %s; using built-in table.", p)
                self.default = str(cfg.get("default") or DEFAULT_CATEGORY)
            else:
                log.info("Rules file not found at %s; using built-in table.", p)

    def categorize(self, description: Optional[str], merchant: Optional[str]) -> str:
        return categorize(description, merchant, self.rules, self.default)

    def __call__(self, description: Optional[str], merchant: Optional[str]) -> str:
        return self.categorize(description, merchant)

    def rule_count(self) -> int:
        """Return number of rules configured."""
        return len(self.rules)
