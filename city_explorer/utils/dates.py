from datetime import datetime, timezone

DAY_FORMAT = '%a %b %d %Y'


def day_string_from_seconds(timestamp):
    """Unix seconds -> 'Mon Jan 07 2019' (UTC)."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(DAY_FORMAT)


def day_string_from_millis(timestamp):
    return day_string_from_seconds(timestamp / 1000.0)


def split_date_time(value):
    """'2019-01-07 14:30:00' -> ('2019-01-07', '14:30:00'); missing parts are ''."""
    parts = (value or '').split(' ')
    date_part = parts[0] if len(parts) > 0 else ''
    time_part = parts[1] if len(parts) > 1 else ''
    return date_part, time_part
