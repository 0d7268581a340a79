from base_rule import BaseRule
from function_catalog import build_function_catalog


class DefinitionDiffRule(BaseRule):
    """
    Reports functions and methods whose canonical definition was modified,
    added or removed between the two snapshots.
    """

    tag = "STRATEGY_A"
    target_key = "functions"

    def apply(self, old, new):
        messages = []
        old_functions = build_function_catalog(old)
        new_functions = build_function_catalog(new)

        for name in self.checked_targets(messages):
            old_text = old_functions.get(name)
            new_text = new_functions.get(name)

            if old_text is not None and new_text is not None:
                if old_text != new_text:
                    messages.append(self.report(f"Function or method '{name}' in '{self.file}' has been modified."))
            elif new_text is not None:
                messages.append(self.report(f"Function or method '{name}' in '{self.file}' has been added."))
            elif old_text is not None:
                messages.append(self.report(f"Function or method '{name}' in '{self.file}' has been removed."))

        return messages
