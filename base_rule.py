import re


_IDENT_RE = re.compile(r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*")

# Reserved words that cannot name an item unless written as raw identifiers.
RUST_KEYWORDS = frozenset(
    """
    as async await break const continue crate dyn else enum extern false fn for
    if impl in let loop match mod move mut pub ref return self Self static struct
    super trait true type unsafe use where while abstract become box do final
    macro override priv typeof unsized virtual yield try
    """.split()
)
_RAW_FORBIDDEN = frozenset({"crate", "self", "Self", "super", "_"})


def is_rust_identifier(name):
    if not isinstance(name, str) or not _IDENT_RE.fullmatch(name):
        return False
    if name.startswith("r#"):
        return name[2:] not in _RAW_FORBIDDEN
    return name != "_" and name not in RUST_KEYWORDS


def is_lookup_name(name):
    """A bare identifier or a ``Type::ident`` path."""
    if not isinstance(name, str):
        return False
    parts = name.split("::")
    if len(parts) > 2:
        return False
    return all(is_rust_identifier(part) for part in parts)


class BaseRule:
    """
    One configured rule: a file scope plus an ordered list of targets.
    """

    tag = None
    target_key = "functions"
    uses_syntax = True

    def __init__(self, file, targets):
        self.file = file
        self.targets = list(targets)

    def matches(self, file):
        return self.file == file

    def apply(self, old, new):
        raise NotImplementedError("apply() must be implemented")

    def report(self, text):
        return f"[{self.tag}] {text}"

    def warn(self, text):
        return f"[WARN] [{self.tag}] {text}"

    def checked_targets(self, messages, kind="function or method", valid=is_lookup_name):
        """
        Yields the targets that are valid names and appends a warning for
        each one that is skipped.
        """
        for target in self.targets:
            if valid(target):
                yield target
                continue
            messages.append(
                self.warn(f"Skipping {kind} '{target}' in '{self.file}': not a valid Rust identifier.")
            )
