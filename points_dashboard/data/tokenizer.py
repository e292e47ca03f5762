"""Line splitting for spreadsheet CSV exports.

Exports come out comma- or semicolon-separated depending on the locale of
whoever published the sheet, so the delimiter is sniffed from the content.
"""

from typing import Iterable


COMMA = ","
SEMICOLON = ";"
QUOTE = '"'


def detect_delimiter(lines: Iterable[str]) -> str:
    """Pick the field delimiter from the first non-blank line."""
    sample = next((line for line in lines if line.strip()), "")
    if SEMICOLON in sample:
        return SEMICOLON
    return COMMA


def tokenize_line(line: str, delimiter: str) -> list[str]:
    """
    Split one CSV line into trimmed fields.

    Double quotes group text containing the delimiter; a doubled quote
    inside a quoted segment is a literal quote. An unterminated quote
    simply runs to the end of the line.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        ch = line[i]

        if ch == QUOTE:
            if in_quotes and line[i + 1:i + 2] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return [f.strip() for f in fields]
