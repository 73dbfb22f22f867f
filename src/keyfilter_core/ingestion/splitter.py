"""Quote-aware splitting of a single delimited line."""

from typing import List


def split_line(line: str, separator: str) -> List[str]:
    """Split one line into trimmed field values.

    Double quotes toggle quoting; ``""`` inside a quoted field is a literal
    quote. The separator only ends a field outside quotes. An unterminated
    quote runs to the end of the line and the partial field is kept.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < length and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == separator and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields
