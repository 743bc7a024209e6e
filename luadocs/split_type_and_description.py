"""Logic for separating a type expression from the prose that follows it."""

UNKNOWN_TYPE = "unknown"

QUOTES = {'"', "'"}
# Characters after a whitespace run that continue the current type expression.
CONTINUATION_CHARS = {"|", ",", ":", ">", ")", "}", "?"}


def split_type_and_description(text: str) -> tuple[str, str | None]:
    """Split `text` into (type expression, description).

    The scan tracks `<>`, `()` and `{}` nesting, skips quoted literals as a
    unit, and decides at each top-level whitespace run whether the type goes
    on. Whitespace continues the type when the next character is a
    continuation character (`|`, `,`, `:`, a closer, `?`, `[]`) or when an
    atom is still expected (after `<`, `(`, `{`, `|`, `,`, `:`), since the
    type cannot end on an operator. Any other whitespace ends the type.
    """
    text = text.strip()
    if not text:
        return UNKNOWN_TYPE, None

    n = len(text)
    i = 0
    in_quote: str | None = None
    angle_depth = 0
    paren_depth = 0
    brace_depth = 0
    expect_atom = True

    while i < n:
        ch = text[i]

        if in_quote:
            if ch == "\\":
                i += 2
                continue
            if ch == in_quote:
                in_quote = None
            i += 1
            continue

        if ch in QUOTES:
            in_quote = ch
            expect_atom = False
            i += 1
            continue

        if ch in "<({":
            if ch == "<":
                angle_depth += 1
            elif ch == "(":
                paren_depth += 1
            else:
                brace_depth += 1
            expect_atom = True
            i += 1
            continue

        if ch in ">)}":
            if ch == ">":
                angle_depth = max(0, angle_depth - 1)
            elif ch == ")":
                paren_depth = max(0, paren_depth - 1)
            else:
                brace_depth = max(0, brace_depth - 1)
            expect_atom = False
            i += 1
            continue

        if ch in "|,:":
            expect_atom = True
            i += 1
            continue

        if ch == "?":
            expect_atom = False
            i += 1
            continue

        if ch == "[" and text[i + 1 : i + 2] == "]":
            expect_atom = False
            i += 2
            continue

        if ch.isspace():
            j = i
            while j < n and text[j].isspace():
                j += 1

            if j >= n:
                i = j
                break

            nxt = text[j]
            nested = angle_depth > 0 or paren_depth > 0 or brace_depth > 0
            if (
                nested
                or nxt in CONTINUATION_CHARS
                or (nxt == "[" and text[j + 1 : j + 2] == "]")
                or expect_atom
            ):
                i = j
                continue

            break

        expect_atom = False
        i += 1

    type_expr = text[:i].strip()
    description = text[i:].strip()
    return type_expr or UNKNOWN_TYPE, description or None
