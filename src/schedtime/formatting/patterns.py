"""Compilation of date-time format patterns.

Patterns use the ``yyyy-MM-dd HH:mm:ss`` letter vocabulary found in
scheduler configuration. A run of one repeated letter is a field token;
text in single quotes is literal (``''`` is a quote). Compiled patterns
render fields directly and parse through ``datetime.strptime``.

Supported letters:
    y     year (``yy`` two digits, otherwise padded to run length)
    M     month (``M``/``MM`` number, ``MMM`` short name, ``MMMM`` full name)
    d     day of month
    D     day of year
    E     weekday name (``EEEE`` full)
    H     hour 0-23
    h     hour 1-12
    a     AM/PM marker
    m     minute
    s     second
    S     fraction of second, truncated to run length
    Z     UTC offset as +HHMM
"""

from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Tuple

from ..errors import InvalidPattern

RESERVED_CHARS = frozenset("[]{}#")

# Longest run accepted per letter
MAX_WIDTH = {
    "y": 4,
    "M": 4,
    "d": 2,
    "D": 3,
    "E": 4,
    "H": 2,
    "h": 2,
    "a": 1,
    "m": 2,
    "s": 2,
    "S": 9,
    "Z": 3,
}


@dataclass(frozen=True)
class Token:
    """Field token, or literal text when ``letter`` is empty."""

    letter: str
    width: int = 0
    text: str = ""

    @property
    def is_literal(self) -> bool:
        return not self.letter

    def render(self, dt: datetime) -> str:
        if self.is_literal:
            return self.text

        letter, width = self.letter, self.width
        if letter == "y":
            return f"{dt.year % 100:02d}" if width == 2 else f"{dt.year:0{width}d}"
        if letter == "M" and width >= 3:
            return dt.strftime("%B" if width == 4 else "%b")
        if letter == "E":
            return dt.strftime("%A" if width == 4 else "%a")
        if letter == "a":
            return "AM" if dt.hour < 12 else "PM"
        if letter == "S":
            return f"{dt.microsecond:06d}000"[:width]
        if letter == "Z":
            return dt.strftime("%z") or "+0000"

        value = {
            "M": dt.month,
            "d": dt.day,
            "D": dt.timetuple().tm_yday,
            "H": dt.hour,
            "h": dt.hour % 12 or 12,
            "m": dt.minute,
            "s": dt.second,
        }[letter]
        return f"{value:0{width}d}"

    def directive(self) -> str:
        """strptime directive matching this token."""
        if self.is_literal:
            return self.text.replace("%", "%%")

        letter, width = self.letter, self.width
        if letter == "y":
            return "%y" if width == 2 else "%Y"
        if letter == "M":
            return {4: "%B", 3: "%b"}.get(width, "%m")
        if letter == "E":
            return "%A" if width == 4 else "%a"
        return {
            "d": "%d",
            "D": "%j",
            "H": "%H",
            "h": "%I",
            "a": "%p",
            "m": "%M",
            "s": "%S",
            "S": "%f",
            "Z": "%z",
        }[letter]


@dataclass(frozen=True)
class CompiledPattern:
    """Tokenized format pattern."""

    pattern: str
    tokens: Tuple[Token, ...]

    @property
    def strptime_format(self) -> str:
        return "".join(token.directive() for token in self.tokens)

    def format(self, dt: datetime) -> str:
        """Render an aware or naive datetime."""
        return "".join(token.render(dt) for token in self.tokens)

    def parse(self, text: str) -> datetime:
        """Parse text into a datetime.

        The result is naive unless the pattern carries a ``Z`` offset.
        ``yy`` reads years 2000-2099. Matching is strict: the parsed value
        must render back to exactly ``text``, so fields are read at their
        run width, whitespace is not collapsed, and a weekday must agree
        with the date.

        Raises:
            ValueError: If text does not match the pattern.
        """
        parsed = datetime.strptime(text, self.strptime_format)
        if any(token.letter == "y" and token.width == 2 for token in self.tokens):
            parsed = parsed.replace(year=2000 + parsed.year % 100)
        if self.format(parsed) != text:
            raise ValueError(f"{text!r} does not match pattern {self.pattern!r}")
        return parsed


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a format pattern.

    Args:
        pattern: Pattern such as ``yyyy-MM-dd HH:mm:ss``.

    Returns:
        Compiled pattern.

    Raises:
        InvalidPattern: If the pattern is empty, uses an unknown or reserved
            letter, repeats a letter too often, or leaves a quote open.
    """
    if not isinstance(pattern, str) or not pattern:
        raise InvalidPattern(f"Pattern must be a non-empty string, got {pattern!r}")
    return _compile(pattern)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> CompiledPattern:
    tokens = []
    literal = []
    i, n = 0, len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append(Token("", text="".join(literal)))
            literal.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            i += 1
            if i < n and pattern[i] == "'":
                literal.append("'")
                i += 1
                continue
            while True:
                if i >= n:
                    raise InvalidPattern(f"Unterminated quote in pattern {pattern!r}")
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char in RESERVED_CHARS:
            raise InvalidPattern(f"Reserved character {char!r} in pattern {pattern!r}")

        if char.isascii() and char.isalpha():
            width = MAX_WIDTH.get(char)
            if width is None:
                raise InvalidPattern(f"Unknown pattern letter {char!r} in {pattern!r}")
            run = 1
            while i + run < n and pattern[i + run] == char:
                run += 1
            if run > width:
                raise InvalidPattern(f"Too many pattern letters: {char * run}")
            flush_literal()
            tokens.append(Token(char, run))
            i += run
            continue

        literal.append(char)
        i += 1

    flush_literal()
    return CompiledPattern(pattern, tuple(tokens))
