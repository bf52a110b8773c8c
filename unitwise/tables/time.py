"""Time units, aliases and factors (base unit: seconds)."""

from __future__ import annotations

from enum import Enum


class TimeUnit(Enum):
    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


BASE_UNIT = TimeUnit.SECOND

ALIASES = (
    ("nanosecond", TimeUnit.NANOSECOND),
    ("nanoseconds", TimeUnit.NANOSECOND),
    ("ns", TimeUnit.NANOSECOND),
    ("microsecond", TimeUnit.MICROSECOND),
    ("microseconds", TimeUnit.MICROSECOND),
    ("µs", TimeUnit.MICROSECOND),  # micro sign
    ("μs", TimeUnit.MICROSECOND),  # Greek mu
    ("millisecond", TimeUnit.MILLISECOND),
    ("milliseconds", TimeUnit.MILLISECOND),
    ("ms", TimeUnit.MILLISECOND),
    ("s", TimeUnit.SECOND),
    ("sec", TimeUnit.SECOND),
    ("seconds", TimeUnit.SECOND),
    ("secs", TimeUnit.SECOND),
    ("m", TimeUnit.MINUTE),
    ("min", TimeUnit.MINUTE),
    ("minute", TimeUnit.MINUTE),
    ("minutes", TimeUnit.MINUTE),
    ("h", TimeUnit.HOUR),
    ("hour", TimeUnit.HOUR),
    ("hours", TimeUnit.HOUR),
    ("hr", TimeUnit.HOUR),
    ("d", TimeUnit.DAY),
    ("day", TimeUnit.DAY),
    ("days", TimeUnit.DAY),
)

SYMBOLS = {
    TimeUnit.NANOSECOND: "ns",
    TimeUnit.MICROSECOND: "µs",
    TimeUnit.MILLISECOND: "ms",
    TimeUnit.SECOND: "s",
    TimeUnit.MINUTE: "m",
    TimeUnit.HOUR: "h",
    TimeUnit.DAY: "d",
}

FACTORS = {
    TimeUnit.NANOSECOND: "0.000000001",
    TimeUnit.MICROSECOND: "0.000001",
    TimeUnit.MILLISECOND: "0.001",
    TimeUnit.SECOND: "1.0",
    TimeUnit.MINUTE: "60.0",
    TimeUnit.HOUR: "3600.0",
    TimeUnit.DAY: "86400.0",
}
