from datetime import datetime, time, timedelta


def seconds_until_cache_expiry(now: datetime | None = None) -> int:
	"""Seconds from ``now`` until the midnight after tomorrow.

	The upstream feed publishes at most once a day, so a response stays
	valid until the day-after-tomorrow boundary.
	"""
	now = now or datetime.now()
	expiry = datetime.combine(now.date() + timedelta(days=2), time.min, tzinfo=now.tzinfo)
	return int((expiry - now).total_seconds())


def cache_control_header(now: datetime | None = None) -> str:
	return f'public, max-age={seconds_until_cache_expiry(now)}'
