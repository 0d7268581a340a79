from base_rule import BaseRule


class OccurrenceDiffRule(BaseRule):
    """
    Compares how often each target name appears in the raw text.

    This is a textual heuristic: matches inside comments, strings or longer
    identifiers are counted too, so reports say "may have been".
    """

    tag = "STRATEGY_B"
    target_key = "functions"
    uses_syntax = False

    def apply(self, old, new):
        messages = []
        for name in self.targets:
            if not name:
                messages.append(self.warn(f"Skipping empty call-site name in '{self.file}'."))
                continue

            old_count = old.text.count(name)
            new_count = new.text.count(name)

            if new_count > old_count:
                messages.append(
                    self.report(
                        f"Call points to '{name}' may have been added in '{self.file}' "
                        f"(occurrence changed from {old_count} to {new_count})."
                    )
                )
            elif new_count < old_count:
                messages.append(
                    self.report(
                        f"Call points to '{name}' may have been removed in '{self.file}' "
                        f"(occurrence changed from {old_count} to {new_count})."
                    )
                )
        return messages
