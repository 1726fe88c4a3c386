# clocktime.py: split a time of day into hour, minute and second values.

import datetime
from dataclasses import dataclass

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


# Each field carries the progress of all finer units in its fraction,
# e.g. 00:30:00 has hours == 0.5 and minutes == 30.
@dataclass(frozen=True)
class DecomposedTime:
    hours: float
    minutes: float
    seconds: float

    # Only hours is needed: its fraction already holds the minutes and
    # seconds.
    def milliseconds_of_day(self):
        return self.hours * MS_PER_HOUR


# decompose - convert milliseconds since midnight into a DecomposedTime
# Every field is taken from the same absolute value, so minutes keeps
# counting within the hour rather than being whatever is left over after
# hours. Python's % floors, so negative input wraps into range.
def decompose(ms_of_day):
    return DecomposedTime(
        hours=(ms_of_day / MS_PER_HOUR) % 24,
        minutes=(ms_of_day / MS_PER_MINUTE) % 60,
        seconds=(ms_of_day / MS_PER_SECOND) % 60,
    )


# ms_of_day - milliseconds since midnight for a datetime or time
def ms_of_day(moment):
    if isinstance(moment, datetime.datetime):
        moment = moment.time()
    return ((moment.hour * 60 + moment.minute) * 60 + moment.second) * MS_PER_SECOND \
        + moment.microsecond / 1000
