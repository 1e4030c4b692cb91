"""Comment stripping applied before any pattern extraction.

Commented-out code must never produce a finding, so every detector works
on normalized text. Three passes run in order: block comments are blanked
(newlines kept so line positions survive), whole-line ``//`` comments are
dropped, then trailing ``//`` comments are cut. Both comment scans skip
string and char literals, so ``"src/*"`` or ``"http://"`` never open a
comment.
"""


def remove_block_comments(code: str) -> str:
    out: list[str] = []
    quote = ""
    i = 0
    while i < len(code):
        char = code[i]
        if quote:
            if char == "\\" and code[i + 1 : i + 2] not in ("", "\n"):
                out.append(code[i : i + 2])
                i += 2
                continue
            # literals never span lines
            if char in (quote, "\n"):
                quote = ""
            out.append(char)
            i += 1
            continue

        pair = code[i : i + 2]
        if pair == "/*":
            end = code.find("*/", i + 2)
            stop = len(code) if end == -1 else end + 2
            out.append("\n" * code.count("\n", i, stop))
            i = stop
        elif pair == "//":
            # a line comment may mention "/*" without opening a block
            end = code.find("\n", i)
            stop = len(code) if end == -1 else end
            out.append(code[i:stop])
            i = stop
        else:
            if char in ('"', "'"):
                quote = char
            out.append(char)
            i += 1
    return "".join(out)


def remove_commented_lines(code: str) -> str:
    """Drop lines whose first non-blank characters are ``//``."""
    return "\n".join(line for line in code.split("\n") if not line.strip().startswith("//"))


def remove_inline_comments(code: str) -> str:
    """Cut ``// ...`` tails that sit outside string and char literals."""
    return "\n".join(_strip_trailing_comment(line) for line in code.split("\n"))


def _strip_trailing_comment(line: str) -> str:
    quote = ""
    i = 0
    while i < len(line) - 1:
        char = line[i]
        if quote:
            if char == "\\":
                i += 2
                continue
            if char == quote:
                quote = ""
        elif char in ('"', "'"):
            quote = char
        elif char == "/" and line[i + 1] == "/":
            return line[:i].rstrip()
        i += 1
    return line


def clean_code(code: str) -> str:
    """Normalize source text for analysis."""
    return remove_inline_comments(remove_commented_lines(remove_block_comments(code)))
