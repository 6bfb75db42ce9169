from calendar import timegm
from datetime import datetime, timezone, timedelta
from typing import Optional, Union
from ad_normalizer.exceptions.ldap import InvalidTimestamp

# Windows filetime constants
EPOCH_AS_FILETIME = 116444736000000000  # January 1, 1970 as filetime
HUNDREDS_OF_NANOSECONDS = 10_000_000    # 10^7 (100 ns per interval)
MICROSECONDS_TO_100NS = 10               # 10 * 100ns = 1μs

# AD integer timestamps use these for "never" (e.g.: accountExpires)
FILETIME_NEVER = (0, 9223372036854775807)

def from_datetime(dt: datetime) -> int:
    """
    Converts a datetime to a Windows filetime.

    For timezone-naive datetimes, UTC is assumed.
    For timezone-aware datetimes, conversion to UTC is performed.
    """
    if not isinstance(dt, datetime):
        raise TypeError("dt must be of type datetime.")
    if dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None:
        dt = dt.astimezone(timezone.utc)
    else:
        dt = dt.replace(tzinfo=timezone.utc)

    epoch_seconds = timegm(dt.timetuple())
    filetime = EPOCH_AS_FILETIME + (epoch_seconds * HUNDREDS_OF_NANOSECONDS)
    return filetime + (dt.microsecond * MICROSECONDS_TO_100NS)

def to_datetime(filetime: int) -> datetime:
    """
    Converts a Windows filetime to a UTC timezone-aware datetime.
    """
    if filetime < 0:
        raise OverflowError("filetime must be non-negative")
    ns100_since_epoch = filetime - EPOCH_AS_FILETIME

    seconds, remainder_ns100 = divmod(ns100_since_epoch, HUNDREDS_OF_NANOSECONDS)
    microseconds = remainder_ns100 // MICROSECONDS_TO_100NS

    utc_epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    return utc_epoch + timedelta(seconds=seconds, microseconds=microseconds)

def convert_filetime(value: Union[int, str]) -> Optional[datetime]:
    """
    Converts an AD integer timestamp attribute (lastLogon, pwdLastSet,
    accountExpires) to a UTC datetime.

    Returns:
        None when the value means "never", otherwise a datetime.

    Raises:
        InvalidTimestamp: For values that are not integers or digit strings.
    """
    if isinstance(value, bool):
        raise InvalidTimestamp(data={"detail": f"Invalid filetime: {value!r}"})
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise InvalidTimestamp(
                data={"detail": f"Invalid filetime: {value!r}"}
            )
        value = int(value)
    elif not isinstance(value, int):
        raise InvalidTimestamp(data={"detail": f"Invalid filetime: {value!r}"})

    if value in FILETIME_NEVER:
        return None
    try:
        return to_datetime(value)
    except OverflowError as e:
        raise InvalidTimestamp(
            data={"detail": f"Invalid filetime: {value!r}"}
        ) from e
