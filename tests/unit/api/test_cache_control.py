# nosec B101


from datetime import UTC, datetime

from api.cache_control import cache_control_header, seconds_until_cache_expiry


def test_expiry_from_midnight_is_two_days():
    assert seconds_until_cache_expiry(datetime(2025, 10, 1, 0, 0, 0)) == 2 * 24 * 3600


def test_expiry_counts_down_through_the_day():
    # 18:30 on Oct 1 -> midnight starting Oct 3
    assert seconds_until_cache_expiry(datetime(2025, 10, 1, 18, 30, 0)) == 29 * 3600 + 30 * 60


def test_expiry_crosses_month_boundary():
    assert seconds_until_cache_expiry(datetime(2025, 10, 31, 23, 59, 59)) == 24 * 3600 + 1


def test_expiry_keeps_timezone():
    assert seconds_until_cache_expiry(datetime(2025, 10, 1, 12, 0, tzinfo=UTC)) == 36 * 3600


def test_header_format():
    assert cache_control_header(datetime(2025, 10, 1, 12, 0, 0)) == 'public, max-age=129600'


def test_header_for_now_is_within_two_days():
    max_age = int(cache_control_header().split('max-age=')[1])

    assert 24 * 3600 <= max_age <= 48 * 3600
