from .css import (
    build_stylesheet,
    generate_preview_css,
    serialize_theme_css,
    serialize_token_set,
)
from .html import create_html_preview
from .json_export import export_json
from .report import generate_readability_report, print_palette

__all__ = [
    "build_stylesheet",
    "create_html_preview",
    "export_json",
    "generate_preview_css",
    "generate_readability_report",
    "print_palette",
    "serialize_theme_css",
    "serialize_token_set",
]
