# attendance/metrics.py

ATTENDANCE_STATUSES = [
    {'key': 'present', 'value': 'Present', 'label': 'Present', 'short_label': 'Present', 'kind': 'present'},
    {'key': 'late', 'value': 'Arrived late', 'label': 'Late', 'short_label': 'Late', 'kind': 'late'},
    {'key': 'left_early', 'value': 'Left early', 'label': 'Left early', 'short_label': 'Left early', 'kind': 'left-early'},
    {'key': 'absent', 'value': "Didn't come", 'label': "Didn't come", 'short_label': 'Absent', 'kind': 'absent'},
]

ATTENDANCE_STATUS_BY_KEY = {status['key']: status for status in ATTENDANCE_STATUSES}
ATTENDANCE_STATUS_BY_VALUE = {status['value']: status for status in ATTENDANCE_STATUSES}

DEFAULT_ATTENDANCE_STATUS = ATTENDANCE_STATUS_BY_KEY['present']['value']


def create_empty_attendance_summary():
    return {status['key']: 0 for status in ATTENDANCE_STATUSES}


def summarize_attendance_entries(entries=()):
    """Counts entries per status key. Entries with an unrecognised status are ignored."""
    summary = create_empty_attendance_summary()
    for entry in entries:
        status = ATTENDANCE_STATUS_BY_VALUE.get(getattr(entry, 'status', None))
        if status:
            summary[status['key']] += 1
    return summary


def get_attendance_total(summary):
    return sum(int(summary.get(status['key']) or 0) for status in ATTENDANCE_STATUSES)


def get_attendance_rate(summary):
    """Percentage of entries marked present, rounded half up to a whole number."""
    total = get_attendance_total(summary)
    if total == 0:
        return 0
    return int(int(summary.get('present') or 0) / total * 100 + 0.5)


def get_attendance_status_meta(status_value):
    meta = ATTENDANCE_STATUS_BY_VALUE.get(status_value)
    if meta:
        return meta
    label = status_value or 'Unknown'
    return {'key': 'unknown', 'value': label, 'label': label, 'short_label': label, 'kind': 'unknown'}
