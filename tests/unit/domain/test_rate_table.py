# nosec B101


import pytest
from datetime import UTC, datetime

from domain.models.currency import RateQuote, RateTable


def quote(code, day=1):
    return RateQuote(code=code, rate=1.5, unit=1, last_update=datetime(2025, 10, day, tzinfo=UTC))


def test_table_preserves_order_and_lookup():
    table = RateTable.from_quotes([quote('USD'), quote('EUR'), quote('GBP')])

    assert table.codes == ['USD', 'EUR', 'GBP']
    assert len(table) == 3
    assert 'EUR' in table
    assert 'CHF' not in table
    assert table.get('GBP').code == 'GBP'
    assert table.get('CHF') is None


def test_with_anchor_appends_and_leaves_original_untouched():
    table = RateTable.from_quotes([quote('USD')])

    anchored = table.with_anchor(quote('ILS'))

    assert anchored.codes == ['USD', 'ILS']
    assert table.codes == ['USD']


def test_duplicate_codes_rejected():
    with pytest.raises(ValueError, match='USD'):
        RateTable.from_quotes([quote('USD'), quote('USD', day=2)])


def test_oldest_update():
    table = RateTable.from_quotes([quote('USD', day=5), quote('EUR', day=2), quote('GBP', day=9)])

    assert table.oldest_update == datetime(2025, 10, 2, tzinfo=UTC)


def test_oldest_update_of_empty_table():
    with pytest.raises(ValueError):
        RateTable().oldest_update
