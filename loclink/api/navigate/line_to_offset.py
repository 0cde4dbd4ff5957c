def line_to_offset(text: str, line: int) -> int:
    """Return the offset where 1-based ``line`` starts in ``text``.

    Lines past the end clamp to the end of the text.
    """
    offset = 0
    for _ in range(max(line, 1) - 1):
        newline = text.find("\n", offset)
        if newline == -1:
            return len(text)
        offset = newline + 1
    return offset
