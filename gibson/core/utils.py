import re

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str | None) -> int | None:
    """Parses a decimal integer with an optional sign. Returns None for anything else."""
    if text is None or not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_player_name(raw: str) -> tuple[str, str]:
    """Splits a Tygem player field like 'kim (2D)' into name and rank."""
    name = raw
    rank = ""
    parts = raw.split("(")
    if len(parts) == 2 and parts[1].endswith(")"):
        name = parts[0].strip()
        rank = parts[1][:-1].strip()
    return name, rank
