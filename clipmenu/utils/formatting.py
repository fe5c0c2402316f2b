"""Text formatting utilities."""


def truncate_text(text: str, max_length: int = 80) -> str:
    """Cut text to max_length characters, like `cut -c1-N`."""
    return text[:max_length]


def format_preview(text: str, max_length: int = 50) -> str:
    return text[:max_length] + "..."


def format_size(size_bytes: int) -> str:
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TB"
