def format_bytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"


def parse_position(text):
    """Parse "r,c" or "(r,c)" into a (row, col) tuple of ints.

    Raises:
        ValueError: text does not hold exactly two integers
    """
    parts = [p.strip() for p in text.strip().strip('()').split(',')]
    if len(parts) != 2:
        raise ValueError(f"Expected 'row,col', got '{text}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Expected integer 'row,col', got '{text}'") from None


def parse_positions(text):
    """Parse a ';' separated list of positions, e.g. "(0,1); (1,0)"."""
    if not text:
        return []
    return [parse_position(chunk) for chunk in text.split(';') if chunk.strip()]
