"""Default display names for new recordings"""

from datetime import datetime

RECORDING_NAME_PREFIX = "My Cap Recording"


def format_recording_date(moment: datetime) -> str:
    """
    Format a date as "<day> <month name> <year>", e.g. "7 March 2024".

    Args:
        moment: Date to format

    Returns:
        Day without zero padding, full month name and four-digit year
    """
    return f"{moment.day} {moment.strftime('%B')} {moment.year}"


def recording_name(moment: datetime) -> str:
    return f"{RECORDING_NAME_PREFIX} - {format_recording_date(moment)}"
