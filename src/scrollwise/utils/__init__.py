"""Utility helpers shared across the Scrollwise package."""

from .io import load_jsonl, load_records, load_yaml_or_json, save_json
from .text import lower_tokens, split_words

__all__ = [
    "load_jsonl",
    "load_records",
    "load_yaml_or_json",
    "lower_tokens",
    "save_json",
    "split_words",
]
