from typing import Iterable, Optional


def clean_string_list(values: Optional[Iterable[str]]) -> list[str]:
    """Trim entries, drop empties and duplicates, keep first-seen order."""
    cleaned: list[str] = []
    seen: set[str] = set()
    for value in values or []:
        item = str(value).strip()
        if item and item not in seen:
            seen.add(item)
            cleaned.append(item)
    return cleaned
