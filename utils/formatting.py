"""utils/formatting.py"""
from config.config import DISPLAY_CONFIG


def format_bool(value):
    """True -> 'T', False -> 'F'"""
    return DISPLAY_CONFIG["true_symbol"] if value else DISPLAY_CONFIG["false_symbol"]


def format_heading(canonical=None, invalid=False):
    if invalid:
        return DISPLAY_CONFIG["invalid_heading"]
    if canonical is None:
        return DISPLAY_CONFIG["idle_heading"]
    return f"{DISPLAY_CONFIG['idle_heading']}{canonical}"
