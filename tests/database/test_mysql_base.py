from __future__ import annotations

from datetime import time, timedelta
from decimal import Decimal

import pytest

from src.sectrack.sectrack.database.mysql_base import normalize_mysql_decimal, normalize_mysql_time


def test_time_columns_arrive_as_timedelta():
    assert normalize_mysql_time(timedelta(hours=13, minutes=30)) == time(13, 30)
    assert normalize_mysql_time(time(9, 0)) == time(9, 0)
    assert normalize_mysql_time(None) is None


def test_unexpected_time_value_raises():
    with pytest.raises(TypeError):
        normalize_mysql_time("09:00")


def test_decimal_hours_become_floats():
    assert normalize_mysql_decimal(Decimal("2.50")) == 2.5
    assert normalize_mysql_decimal(None) == 0.0
