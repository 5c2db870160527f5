# stock/input_reader.py
from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LINE_LENGTH = 100  # includes the line terminator, like a line buffer
NAME_MAX_LENGTH = 50
MAX_INTEGER = 2**63 - 1  # largest value SQLite stores in an INTEGER column

_INTEGER_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_PRICE_RE = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)

INVALID_INTEGER_MSG = "Invalid input. Please enter a non-negative integer: "
NEGATIVE_INTEGER_MSG = "Negative values are not allowed. Please enter an integer >= 0: "
INVALID_PRICE_MSG = "Invalid input. Please enter a valid price (e.g. 12.50): "
EMPTY_TEXT_MSG = "Value cannot be empty. Please try again: "


def parse_non_negative_integer(text: str) -> Tuple[Optional[int], str]:
    """
    Parse a whole line as an integer.

    Returns (value, "") on success, or (None, message) where message is the
    re-prompt to show the user.
    """
    m = _INTEGER_RE.fullmatch(text)
    if not m:
        return None, INVALID_INTEGER_MSG
    val = int(m.group(1))
    if val < 0:
        return None, NEGATIVE_INTEGER_MSG
    if val > MAX_INTEGER:
        return None, INVALID_INTEGER_MSG
    return val, ""


def parse_non_negative_float(text: str) -> Optional[float]:
    # digits with at most one decimal point: no sign, exponent or whitespace
    if not _PRICE_RE.fullmatch(text):
        return None
    return float(text)


class InputReader:
    """
    Line-oriented reader for the interactive shell.

    Every numeric read loops until valid input arrives; the only way out
    without a value is end of input, reported as None.
    """

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout

    def _write(self, text: Optional[str]) -> None:
        if text:
            self.out.write(text)
            self.out.flush()

    def _read(self, max_length: int) -> Tuple[Optional[str], bool]:
        raw = self.stream.readline()
        if raw == "":
            logger.debug("End of input reached")
            return None, False
        line = raw.rstrip("\r\n") if raw.endswith("\n") else raw
        keep = max(max_length - 1, 0)
        truncated = len(line) > keep
        # the rest of an over-long line was consumed by readline and is dropped
        return line[:keep], truncated

    def read_line(self, max_length: int = DEFAULT_LINE_LENGTH) -> Optional[str]:
        line, _ = self._read(max_length)
        return line

    def read_non_negative_integer(self, prompt: Optional[str] = None) -> Optional[int]:
        self._write(prompt)
        while True:
            line, truncated = self._read(DEFAULT_LINE_LENGTH)
            if line is None:
                return None
            if truncated:
                self._write(INVALID_INTEGER_MSG)
                continue
            val, msg = parse_non_negative_integer(line)
            if val is None:
                self._write(msg)
                continue
            return val

    def read_non_negative_float(self, prompt: Optional[str] = None) -> Optional[float]:
        self._write(prompt)
        while True:
            line, truncated = self._read(DEFAULT_LINE_LENGTH)
            if line is None:
                return None
            val = None if truncated else parse_non_negative_float(line)
            if val is None:
                self._write(INVALID_PRICE_MSG)
                continue
            return val

    def read_text(self, prompt: Optional[str] = None, max_length: int = NAME_MAX_LENGTH) -> Optional[str]:
        self._write(prompt)
        while True:
            line = self.read_line(max_length)
            if line is None:
                return None
            text = line.strip()
            if not text:
                self._write(EMPTY_TEXT_MSG)
                continue
            return text
