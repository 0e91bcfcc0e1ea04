from categorizer.rules import compile_rules, parse_rule
from categorizer.service import CategorizerService

import os
import tempfile
import yaml


def test_service_loads_yaml_rules_in_order():
    cfg = {
        "default": "Misc",
        "rules": [
            {"category": "Coffee", "keywords": ["Starbucks", "espresso"]},
            {"category": "Food & Drink", "keywords": ["starbucks"]},
        ],
    }
    with tempfile.NamedTemporaryFile("w", delete=False, suffix=".yaml") as f:
        yaml.safe_dump(cfg, f)
        path = f.name
    try:
        svc = CategorizerService(rules_path=path)
        assert svc.rule_count() == 2
        assert svc.categorize("STARBUCKS #55", "") == "Coffee"
        assert svc("bank fee", "") == "Misc"
    finally:
        os.remove(path)


def test_missing_rules_file_uses_builtin_table(tmp_path):
    svc = CategorizerService(rules_path=str(tmp_path / "nope.yaml"))
    assert svc.rule_count() == 8
    assert svc.categorize("Starbucks Coffee", "") == "Dining"


def test_shipped_rules_file_matches_builtin_table():
    from pathlib import Path

    from categorizer.rules import DEFAULT_RULES

    shipped = Path(__file__).resolve().parents[1] / "config" / "categories.yaml"
    svc = CategorizerService(rules_path=str(shipped))
    assert svc.rules == DEFAULT_RULES
    assert svc.default == "Other"


def test_parse_rule_skips_incomplete_entries():
    assert parse_rule({"category": "X"}) is None
    assert parse_rule({"keywords": ["x"]}) is None
    rule = parse_rule({"category": "Gym", "keywords": "FITNESS"})
    assert rule.keywords == ("fitness",)

    rules = compile_rules(
        {"rules": [{"category": "A", "keywords": ["a"]}, {"category": "B"}]}
    )
    assert [r.category for r in rules] == ["A"]
