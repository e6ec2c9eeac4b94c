import pytest

from dialogkit.core.cron_text import cron_to_text, parse_cron
from dialogkit.core.errors import CronParseError


@pytest.mark.parametrize("cron, text", [
    ('0 5 * * *', "At 05:00 every day"),
    ('*/5 * * * *', "Every 5 minutes"),
    ('* * * * *', "Every minute"),
    ('0 8 * * 1-5', "At 08:00 on Monday, Tuesday, Wednesday, Thursday and Friday"),
    ('0 0 1 * *', "At 00:00 on the 1st of every month"),
    ('@daily', "At 00:00 every day"),
    ("'0 5 * * *'", "At 05:00 every day"),
])
def test_cron_to_text(cron, text):
    assert cron_to_text(cron) == text


def test_parse_cron_with_seconds():
    fields = parse_cron('*/10 * * * * *')
    assert fields['with_seconds']
    assert fields['second'].step == 10
    assert fields['minute'].any


def test_weekday_names_and_sunday():
    fields = parse_cron('0 5 * * MON,7')
    assert fields['weekday'].values == [0, 1]


@pytest.mark.parametrize("cron", ['', 'a b c', '61 * * * *', '0 5 * * FOO', '*/0 * * * *'])
def test_invalid_cron_raises(cron):
    with pytest.raises(CronParseError):
        cron_to_text(cron)


def test_cron_parse_error_is_value_error():
    with pytest.raises(ValueError) as exc:
        parse_cron('1 2 3')
    assert exc.value.expression == '1 2 3'
