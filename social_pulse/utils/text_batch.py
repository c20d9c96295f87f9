"""Batch construction from free-form input text"""

from typing import List


def split_input_text(text: str) -> List[str]:
    """Split text into one comment per line, trimming lines and dropping blank ones."""
    return [line.strip() for line in text.split("\n") if line.strip()]
