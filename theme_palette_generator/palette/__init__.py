from .generator import generate_theme, validate_theme_contrast
from .loader import load_tokens_from_json

__all__ = ["generate_theme", "validate_theme_contrast", "load_tokens_from_json"]
