import argparse
import json
import re
import sys

from engine_factory import ALL_STRATEGIES, build_engine
from monitor_config import ConfigError, load_config
from rust_parser import ParseRustError, parse_rust_source, read_source


TAG_RE = re.compile(r"^\[(STRATEGY_[ABC])\] ")


def _build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="change-monitor",
        description="Scan two versions of a Rust file for AST changes according to preset rules.",
    )
    parser.add_argument("--file", required=True, help="Logical path of the file; selects which rules apply.")
    parser.add_argument("--old", required=True, help="Path to the old version of the file.")
    parser.add_argument("--new", required=True, help="Path to the new version of the file.")
    parser.add_argument("--config", required=True, help="Path to the rule document (TOML, or JSON by extension).")
    parser.add_argument(
        "--strategies",
        default=None,
        help="Comma-separated strategies to run (a, b, c). Defaults to all.",
    )
    parser.add_argument("--json", action="store_true", help="Print a single JSON payload instead of text lines.")
    return parser


def _parse_strategies(raw):
    if raw is None:
        return sorted(ALL_STRATEGIES), None
    selected = [s.strip().lower() for s in raw.split(",") if s.strip()]
    unknown = sorted({s for s in selected if s not in ALL_STRATEGIES})
    if unknown:
        error = (
            "Unknown strategy(s): "
            + ", ".join(unknown)
            + ". Valid strategies: "
            + ", ".join(sorted(ALL_STRATEGIES))
            + "."
        )
        return None, error
    return sorted(set(selected) or ALL_STRATEGIES), None


def _classify_message(message):
    if message.startswith("[WARN] "):
        cleaned = message[len("[WARN] "):]
        m = TAG_RE.match(cleaned)
        return {
            "severity": "warning",
            "strategy": m.group(1) if m else None,
            "message": cleaned[m.end():] if m else cleaned,
        }

    m = TAG_RE.match(message)
    return {
        "severity": "report",
        "strategy": m.group(1) if m else None,
        "message": message[m.end():] if m else message,
    }


def _summary(reports):
    by_strategy = {}
    for item in reports:
        strategy = item.get("strategy")
        if strategy:
            by_strategy[strategy] = by_strategy.get(strategy, 0) + 1
    return {"total": len(reports), "by_strategy": by_strategy}


def _print_error(args, error):
    """Diagnostics always go to stderr; --json also gets a failure payload on stdout."""
    if args.json:
        print(json.dumps({"ok": False, "error": error}))
    print(error, file=sys.stderr)


def run(args):
    """Runs one comparison and returns the process exit status."""
    strategies, error = _parse_strategies(args.strategies)
    if error:
        _print_error(args, error)
        return 2

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        _print_error(args, str(exc))
        return 1

    try:
        old = parse_rust_source(read_source(args.old))
        new = parse_rust_source(read_source(args.new))
    except ParseRustError as exc:
        _print_error(args, f"Error: {exc}")
        return 1

    engine = build_engine(config, file=args.file, enabled_strategies=strategies)
    messages = engine.run(args.file, old, new)

    reports = [m for m in messages if not m.startswith("[WARN]")]
    warnings = [m for m in messages if m.startswith("[WARN]")]

    if args.json:
        report_items = [_classify_message(m) for m in reports]
        print(
            json.dumps(
                {
                    "ok": True,
                    "file": args.file,
                    "strategies": strategies,
                    "reports": report_items,
                    "warnings": [_classify_message(m) for m in warnings],
                    "summary": _summary(report_items),
                }
            )
        )
        return 0

    for warning in warnings:
        print(warning, file=sys.stderr)
    for report in reports:
        print(report)
    return 0


def main(argv=None):
    args = _build_arg_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
