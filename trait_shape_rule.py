from base_rule import BaseRule, is_rust_identifier
from trait_catalog import build_trait_catalog, trait_method_names


class TraitShapeRule(BaseRule):
    """
    Reports methods added to or removed from a trait that exists in both
    snapshots. A trait that appears or disappears as a whole is not reported.
    """

    tag = "STRATEGY_C"
    target_key = "traits"

    def apply(self, old, new):
        messages = []
        old_traits = build_trait_catalog(old)
        new_traits = build_trait_catalog(new)

        for trait_name in self.checked_targets(messages, kind="trait", valid=is_rust_identifier):
            old_trait = old_traits.get(trait_name)
            new_trait = new_traits.get(trait_name)
            if old_trait is None or new_trait is None:
                continue

            old_methods = trait_method_names(old_trait)
            new_methods = trait_method_names(new_trait)
            old_set = set(old_methods)
            new_set = set(new_methods)

            for method in new_methods:
                if method not in old_set:
                    messages.append(
                        self.report(f"Method '{method}' was added to trait '{trait_name}' in '{self.file}'.")
                    )
            for method in old_methods:
                if method not in new_set:
                    messages.append(
                        self.report(f"Method '{method}' was removed from trait '{trait_name}' in '{self.file}'.")
                    )
        return messages
