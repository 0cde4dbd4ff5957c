def serialize_metalink(root: str) -> str:
    """Render a root declaration as metalink text, terminated by a line break."""
    if not root or "[" in root or "]" in root or "\n" in root:
        raise ValueError(f"Invalid metalink root: {root!r}")
    return f"#[:meta:root:{root}]\n"
