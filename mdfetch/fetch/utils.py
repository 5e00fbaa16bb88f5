def select_window(content: str, start_index: int, max_length: int) -> str:
    """
    Return the slice of ``content`` starting at ``start_index``.

    A negative start is treated as 0 and a start past the end yields "".
    ``max_length <= 0`` means no upper bound.
    Examples: ("This is a long sentence.", 5, 6) -> "is a l", ("abc", 0, 0) -> "abc"
    """
    length = len(content)
    if start_index < 0:
        start_index = 0
    if start_index >= length:
        return ""

    end_index = length
    if max_length > 0:
        end_index = min(length, start_index + max_length)
    return content[start_index:end_index]

def is_html(content_type: str) -> bool:
    return "text/html" in (content_type or "").lower()
