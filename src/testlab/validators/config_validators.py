def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().lower()


def to_language_code(value: str | None) -> str | None:
    """
    Reduce a POSIX/BCP-47 style locale to its bare language code.

    Examples:
        "id_ID.UTF-8" -> "id"
        "en-US"       -> "en"
        "EN"          -> "en"
    """
    if value is None:
        return None
    value = value.strip()
    for sep in (".", "@"):
        value = value.split(sep, 1)[0]
    return value.replace("-", "_").split("_", 1)[0].lower()
