import json
import os
import tomllib


STRATEGY_TARGET_KEYS = {
    "strategy_a": "functions",
    "strategy_b": "functions",
    "strategy_c": "traits",
}


class ConfigError(RuntimeError):
    pass


def _load_document(filename):
    if not os.path.isfile(filename):
        raise ConfigError(f"Error reading config file '{filename}': file does not exist.")

    try:
        with open(filename, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise ConfigError(f"Error reading config file '{filename}': {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Error reading config file '{filename}': {exc}") from exc

    if filename.lower().endswith(".json"):
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Error parsing JSON config file: {exc}") from exc

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Error parsing TOML config file: {exc}") from exc


def _validate_rule(section, index, entry):
    where = f"{section}[{index}]"
    target_key = STRATEGY_TARGET_KEYS[section]

    if not isinstance(entry, dict):
        raise ConfigError(f"Error parsing config: {where} must be a table.")

    file = entry.get("file")
    if not isinstance(file, str):
        raise ConfigError(f"Error parsing config: {where} is missing a string 'file'.")

    targets = entry.get(target_key)
    if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
        raise ConfigError(f"Error parsing config: {where} needs '{target_key}' as a list of strings.")

    return {"file": file, target_key: list(targets)}


def parse_config(document):
    """
    Normalizes a loaded rule document into one list of rules per strategy.

    Missing strategy lists default to empty; unknown keys are ignored.
    """
    if not isinstance(document, dict):
        raise ConfigError("Error parsing config: the document must be a table at the top level.")

    config = {}
    for section in STRATEGY_TARGET_KEYS:
        entries = document.get(section, [])
        if not isinstance(entries, list):
            raise ConfigError(f"Error parsing config: '{section}' must be a list of rules.")
        config[section] = [_validate_rule(section, i, entry) for i, entry in enumerate(entries)]
    return config


def load_config(filename):
    return parse_config(_load_document(filename))
