def qualified(prefix: str, name: str) -> str:
    return f"{prefix}:{name}" if prefix else name


def split_qualified(name: str) -> tuple[str, str]:
    prefix, sep, local = name.partition(":")
    if not sep:
        return "", name
    return prefix, local
