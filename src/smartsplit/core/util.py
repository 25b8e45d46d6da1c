"""Small utility functions."""

import json
from typing import Any

def count_words(text: str) -> int:
    """Count maximal whitespace-delimited runs, whatever the script."""
    return len(text.split())

def safe_json(obj: Any) -> str:
    """Serialize plain lists/dicts to indented JSON, keeping non-ASCII text readable."""
    try:
        return json.dumps(obj, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"
