from rule_engine import RuleEngine

from definition_diff_rule import DefinitionDiffRule
from occurrence_diff_rule import OccurrenceDiffRule
from trait_shape_rule import TraitShapeRule


STRATEGY_RULES = {
    "a": ("strategy_a", DefinitionDiffRule),
    "b": ("strategy_b", OccurrenceDiffRule),
    "c": ("strategy_c", TraitShapeRule),
}
ALL_STRATEGIES = set(STRATEGY_RULES)


def _normalized_strategies(enabled_strategies):
    if not enabled_strategies:
        return set(ALL_STRATEGIES)
    return {s for s in enabled_strategies if s in ALL_STRATEGIES}


def build_engine(config, file=None, enabled_strategies=None):
    """
    Builds the rule engine for one file. Strategy A rules come first, then
    B, then C, each in config order.
    """
    strategies = _normalized_strategies(enabled_strategies)
    rules = []

    for key in sorted(STRATEGY_RULES):
        if key not in strategies:
            continue
        section, rule_class = STRATEGY_RULES[key]
        for entry in config.get(section, []):
            if file is not None and entry["file"] != file:
                continue
            rules.append(rule_class(entry["file"], entry[rule_class.target_key]))

    return RuleEngine(rules)
