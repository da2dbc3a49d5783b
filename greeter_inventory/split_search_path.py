from pathlib import Path


def split_search_path(value: str) -> list[Path]:
    """Split a colon-separated directory list, keeping order and dropping blanks."""
    return [Path(part) for part in value.split(":") if part.strip()]
