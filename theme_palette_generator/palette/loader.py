import json

from ..color import parse_color
from .generator import MODES, ThemeTokens
from .tokens import TOKEN_NAMES, ensure_complete


def load_tokens_from_json(json_path):
    """Load light and dark token sets from an exported tokens JSON file.

    Args:
        json_path: Path to a file written by export_json

    Returns:
        ThemeTokens with Oklch values, ordered as TOKEN_NAMES

    Raises:
        ValueError: a mode is missing, a color is unparseable or a slot is empty
    """
    with open(json_path) as f:
        data = json.load(f)

    modes = {}
    for mode in MODES:
        entries = data.get(mode)
        if not isinstance(entries, dict):
            raise ValueError(f"{json_path}: missing '{mode}' token set")

        token_set = {}
        for key, value in entries.items():
            # Skip metadata keys
            if key.startswith("_"):
                continue
            color = parse_color(value)
            if color is None:
                raise ValueError(f"{json_path}: {mode}.{key} is not a color: {value!r}")
            token_set[key] = color

        ensure_complete(token_set)
        modes[mode] = {name: token_set[name] for name in TOKEN_NAMES}

    return ThemeTokens(light=modes["light"], dark=modes["dark"])
