import re
from datetime import UTC, datetime, timedelta, timezone

from domain.exceptions.rates import TimeFormatError

RFC3339_PATTERN = re.compile(
	r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?(Z|[+-]\d{2}:\d{2})$'
)


def utc_now() -> datetime:
	return datetime.now(UTC)


def format_rfc3339(dt: datetime) -> str:
	"""Format ``dt`` in UTC with seconds precision, e.g. 2024-01-01T12:00:00Z."""
	return dt.astimezone(UTC).strftime('%Y-%m-%dT%H:%M:%SZ')


def parse_rfc3339(value: str) -> datetime:
	"""Parse an RFC3339 timestamp, keeping the offset it was reported with."""
	match = RFC3339_PATTERN.match(value) if isinstance(value, str) else None
	if match is None:
		raise TimeFormatError(f'Timestamp is not RFC3339: {value!r}')

	year, month, day, hour, minute, second, fraction, offset = match.groups()
	# sub-microsecond digits are dropped
	microsecond = int((fraction or '0')[:6].ljust(6, '0'))

	if offset == 'Z':
		tz = UTC
	else:
		sign = 1 if offset[0] == '+' else -1
		hours, minutes = int(offset[1:3]), int(offset[4:6])
		if hours > 23 or minutes > 59:
			raise TimeFormatError(f'Timestamp has an invalid offset: {value!r}')
		tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

	try:
		return datetime(
			int(year), int(month), int(day),
			int(hour), int(minute), int(second), microsecond,
			tzinfo=tz,
		)
	except ValueError as e:
		raise TimeFormatError(f'Timestamp is out of range: {value!r}') from e
