"""Time values as they appear in API responses."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _rfc1123(moment: datetime) -> str:
    return (
        f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment:%H:%M:%S} {moment.tzname() or ''}"
    ).rstrip()


def _zone_name(moment: datetime) -> str:
    tz = moment.tzinfo
    if isinstance(tz, ZoneInfo):
        return tz.key
    if tz is timezone.utc:
        return "UTC"
    return moment.tzname() or ""


@dataclass
class DateTime:
    """A point in time with its display text and IANA time zone."""

    text: str = ""
    time_zone: str = ""
    value: int = 0

    def to_datetime(self) -> datetime:
        """Return an aware datetime in the named zone, or local time if unknown."""
        moment = datetime.fromtimestamp(self.value, tz=timezone.utc)
        if self.time_zone in ("", "UTC"):
            return moment
        if self.time_zone == "Local":
            return moment.astimezone()
        try:
            return moment.astimezone(ZoneInfo(self.time_zone))
        except (ZoneInfoNotFoundError, ValueError):
            return moment.astimezone()

    @classmethod
    def from_datetime(cls, moment: datetime | None) -> DateTime | None:
        """Build from a datetime; None for no time. Naive datetimes count as local."""
        if moment is None:
            return None
        if moment.tzinfo is None:
            moment = moment.astimezone()
            zone = "Local"
        else:
            zone = _zone_name(moment)
        return cls(text=_rfc1123(moment), time_zone=zone, value=int(moment.timestamp()))


def _total_microseconds(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def _fraction(value: int, digits: int) -> str:
    whole, frac = divmod(value, 10**digits)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(delta: timedelta) -> str:
    """Format a duration as hours, minutes and seconds, e.g. "1h2m3.5s"."""
    total = _total_microseconds(delta)
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)
    if total < 1000:
        return f"{sign}{total}\u00b5s"
    if total < 1_000_000:
        return f"{sign}{_fraction(total, 3)}ms"
    hours, rest = divmod(total, 3_600_000_000)
    minutes, micros = divmod(rest, 60_000_000)
    seconds = f"{_fraction(micros, 6)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


@dataclass
class Duration:
    """A duration in whole seconds with human-readable text."""

    value: int = 0
    text: str = ""

    def to_timedelta(self) -> timedelta:
        """Return the duration as a timedelta."""
        return timedelta(seconds=self.value)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Build from a timedelta, truncating to whole seconds."""
        total = _total_microseconds(delta)
        if total == 0:
            return cls()
        seconds = abs(total) // 1_000_000
        return cls(value=-seconds if total < 0 else seconds, text=format_duration(delta))


@dataclass
class Location:
    """A point given with long-form latitude and longitude names."""

    latitude: float = 0.0
    longitude: float = 0.0