"""Logic for scanning a default value literal out of free text."""

QUOTES = {'"', "'"}
CLOSERS = {"{": "}", "[": "]", "(": ")"}


def read_default_value(source: str, start: int) -> tuple[str, int] | None:
    """Read the literal starting at or after `start`.

    Returns (literal, end index) or None when only whitespace remains.
    Quoted strings end at the matching unescaped quote, bracketed values at
    the balancing closer, and bare tokens at the next whitespace.
    """
    n = len(source)
    i = start
    while i < n and source[i].isspace():
        i += 1

    if i >= n:
        return None

    begin = i
    opening = source[i]

    if opening in QUOTES:
        i += 1
        while i < n:
            ch = source[i]
            if ch == "\\":
                i += 2
                continue
            i += 1
            if ch == opening:
                break
        i = min(i, n)
        return source[begin:i], i

    if opening in CLOSERS:
        stack = [CLOSERS[opening]]
        i += 1
        in_quote: str | None = None

        while i < n:
            ch = source[i]

            if in_quote:
                if ch == "\\":
                    i += 2
                    continue
                i += 1
                if ch == in_quote:
                    in_quote = None
                continue

            if ch in QUOTES:
                in_quote = ch
            elif ch in CLOSERS:
                stack.append(CLOSERS[ch])
            elif ch == stack[-1]:
                stack.pop()
                if not stack:
                    i += 1
                    break
            i += 1

        i = min(i, n)
        return source[begin:i], i

    while i < n and not source[i].isspace():
        i += 1
    return source[begin:i], i
