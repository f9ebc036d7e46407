"""Bitcoin value lookup against a table of historical exchange rates."""

from __future__ import annotations

import re
import struct
import sys
from bisect import bisect_right
from typing import Iterable, Iterator

RATES_FILE = "data.csv"
EARLIEST_DATE = "2010-08-14"
MAX_VALUE = 1000

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_SPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """A line of input that cannot be converted."""


def _to_float32(number: float, *, saturate: bool = False) -> float:
    """Round a number to single precision.

    Out-of-range values raise OverflowError unless ``saturate`` is set,
    in which case they become signed infinity.
    """
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        if saturate:
            return float("inf") if number > 0 else float("-inf")
        raise


class _Scanner:
    """Whitespace-separated extraction from a single line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _SPACE:
            self._pos += 1

    def word(self) -> str | None:
        self._skip_space()
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] not in _SPACE:
            self._pos += 1
        return self._text[start:self._pos] or None

    def char(self) -> str | None:
        self._skip_space()
        if self._pos >= len(self._text):
            return None
        found = self._text[self._pos]
        self._pos += 1
        return found

    def number(self) -> float | None:
        self._skip_space()
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        try:
            return _to_float32(float(match.group()))
        except OverflowError:
            return None


def _atoi(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def is_valid_date(date: str) -> bool:
    """Tell whether a YYYY-MM-DD string names a real calendar day."""
    year = _atoi(date[0:4])
    month = _atoi(date[5:7])
    day = _atoi(date[8:10])

    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    if month == 2:
        if day > 29:
            return False
        leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
        if day == 29 and not leap:
            return False
    elif month in (4, 6, 9, 11) and day > 30:
        return False
    return True


def _data_lines(filename: str) -> list[str]:
    """Read a file's lines, dropping the header line."""
    with open(filename, encoding="utf-8") as handle:
        lines = [line.rstrip("\n") for line in handle]
    return lines[1:]


class BitcoinExchange:
    """A table of exchange rates keyed by date."""

    def __init__(self, rates=None) -> None:
        self._rates: dict[str, float] = {}
        for date, rate in dict(rates or {}).items():
            self._rates[date] = _to_float32(float(rate))

    @property
    def rates(self) -> dict[str, float]:
        """A copy of the loaded rates, ordered by date."""
        return {date: self._rates[date] for date in sorted(self._rates)}

    def load_rate_lines(self, lines: Iterable[str]) -> list[str]:
        """Load ``date,rate`` lines; return the lines that could not be read."""
        rejected = []
        for line in lines:
            scanner = _Scanner(line.replace(",", " ", 1))
            date = scanner.word()
            rate = scanner.number() if date is not None else None
            if rate is None:
                rejected.append(line)
                continue
            self._rates[date] = rate
        return rejected

    def load_exchange_rates(self, filename: str) -> list[str]:
        """Load a CSV rate file whose first line is a header.

        Returns the data lines that could not be read; raises OSError
        if the file cannot be opened.
        """
        return self.load_rate_lines(_data_lines(filename))

    def parse_line(self, line: str) -> tuple[str, float]:
        """Check one ``date | value`` line and return its date and value."""
        scanner = _Scanner(line)
        date = scanner.word()
        delimiter = scanner.char() if date is not None else None
        value = scanner.number() if delimiter is not None else None
        if value is None:
            raise InputError(f"invalid input format => {line}")
        if value < 0:
            raise InputError("not a positive number.")
        if value > MAX_VALUE:
            raise InputError("too large a number.")
        if delimiter != "|":
            raise InputError("invalid delimiter.")
        if len(date) != 10 or date[4] != "-" or date[7] != "-":
            raise InputError("invalid date format.")
        if date < EARLIEST_DATE:
            raise InputError("date out of range.")
        if not is_valid_date(date):
            raise InputError("invalid date.")
        return date, value

    def calculate_exchange_rate(self, date: str, value: float) -> float:
        """Value ``value`` bitcoins at the latest rate on or before ``date``.

        A date earlier than every known rate uses the earliest rate.
        """
        if not self._rates:
            raise LookupError("no exchange rates loaded")
        keys = sorted(self._rates)
        index = max(bisect_right(keys, date) - 1, 0)
        rate = self._rates[keys[index]]
        return _to_float32(_to_float32(value) * rate, saturate=True)

    def process_lines(self, lines: Iterable[str]) -> Iterator[str | InputError]:
        """Yield a result line for each good input line, or the error for a bad one."""
        for line in lines:
            try:
                date, value = self.parse_line(line)
            except InputError as error:
                yield error
                continue
            result = self.calculate_exchange_rate(date, value)
            yield f"{date} => {value:g} = {result:g}"

    def parse_input(self, filename: str) -> list[str | InputError]:
        """Process an input file whose first line is a header."""
        return list(self.process_lines(_data_lines(filename)))


def main(argv=None) -> int:
    """Value each line of the input file against ``data.csv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: wrong number of arguments", file=sys.stderr)
        return 1

    exchange = BitcoinExchange()
    try:
        for _ in exchange.load_exchange_rates(RATES_FILE):
            print("Error: invalid exchange rate format", file=sys.stderr)
    except OSError:
        print("Error: could not open data.csv", file=sys.stderr)

    try:
        lines = _data_lines(args[0])
    except OSError:
        print("Error: could not open input file", file=sys.stderr)
        return 0

    try:
        for outcome in exchange.process_lines(lines):
            if isinstance(outcome, InputError):
                print(f"Error: {outcome}", file=sys.stderr)
            else:
                print(outcome)
    except LookupError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0