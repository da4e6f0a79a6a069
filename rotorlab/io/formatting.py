from __future__ import annotations


def format_message(msg: str, group: int = 5) -> str:
    """Split MSG into groups of GROUP symbols separated by single spaces."""
    if group < 1:
        raise ValueError("group size must be positive")
    return " ".join(msg[i : i + group] for i in range(0, len(msg), group))
