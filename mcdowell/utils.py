def normalize(text: str | None) -> str:
    """
    Trim surrounding whitespace/newlines and lowercase, so fragment matching
    is case-insensitive.
    """
    return (text or "").strip().lower()
