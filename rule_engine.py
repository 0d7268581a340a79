from rust_parser import STATUS_UNPARSABLE


class RuleEngine:
    """
    Applies a collection of strategy rules to one old/new pair of
    snapshots and collects human-readable reports.
    """

    def __init__(self, rules):
        self.rules = rules

    def _parse_warnings(self, file, old, new):
        warnings = []
        for label, parsed in (("old", old), ("new", new)):
            if parsed.status == STATUS_UNPARSABLE:
                warnings.append(
                    f"[WARN] The {label} version of '{file}' could not be parsed as Rust; "
                    "syntax-based checks treat it as an empty file."
                )
        return warnings

    def run(self, file, old, new):
        explanations = []

        if any(rule.uses_syntax for rule in self.rules if rule.matches(file)):
            explanations.extend(self._parse_warnings(file, old, new))

        for rule in self.rules:
            # Rules scoped to another file are inert
            if not rule.matches(file):
                continue
            explanations.extend(rule.apply(old, new) or [])

        return explanations
