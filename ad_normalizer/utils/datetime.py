from datetime import datetime, timezone
from ad_normalizer.constants.attrs import LDAP_DATE_FORMAT
from ad_normalizer.exceptions.ldap import InvalidTimestamp

# Positional slices of an LDAP Generalized Time string (YYYYMMDDHHMMSS.fZ)
GENERALIZED_TIME_SLICES = (
	slice(0, 4),  # Year
	slice(4, 6),  # Month
	slice(6, 8),  # Day
	slice(8, 10),  # Hour
	slice(10, 12),  # Minute
	slice(12, 14),  # Second
)
GENERALIZED_TIME_MIN_LENGTH = 14


def convert_to_date(s: str) -> datetime:
	"""
	Converts an LDAP Generalized Time string (e.g.: 20151008164023.0Z) to a
	UTC timezone-aware datetime. The fraction and trailing Z are ignored.

	Raises:
		InvalidTimestamp: For non-string, short, non-numeric or out of range
		values.

	Returns:
		datetime
	"""
	if not isinstance(s, str) or len(s) < GENERALIZED_TIME_MIN_LENGTH:
		raise InvalidTimestamp(
			data={"detail": f"Invalid LDAP Generalized Time: {s!r}"}
		)
	date_part = s[:GENERALIZED_TIME_MIN_LENGTH]
	if not (date_part.isascii() and date_part.isdigit()):
		raise InvalidTimestamp(
			data={"detail": f"Invalid LDAP Generalized Time: {s!r}"}
		)

	try:
		return datetime(
			*(int(date_part[sl]) for sl in GENERALIZED_TIME_SLICES),
			tzinfo=timezone.utc,
		)
	except ValueError as e:
		raise InvalidTimestamp(
			data={"detail": f"Invalid LDAP Generalized Time: {s!r} ({e})"}
		) from e


def convert_from_date(dt: datetime) -> str:
	"""
	Converts a datetime to an LDAP Generalized Time string.
	For timezone-naive datetimes, UTC is assumed.
	"""
	if not isinstance(dt, datetime):
		raise TypeError("dt must be of type datetime.")
	if dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None:
		dt = dt.astimezone(timezone.utc)
	return dt.strftime(LDAP_DATE_FORMAT)
