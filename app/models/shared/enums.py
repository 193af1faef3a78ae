from enum import Enum

# Enums
class DayStatus(str, Enum):
    NORMAL = "NORMAL"
    OVERTIME = "OVERTIME"
    UNDERTIME = "UNDERTIME"
    ABSENT = "ABSENT"
    TIME_OFF = "TIME_OFF"
    HOLIDAY = "HOLIDAY"
    BIRTHDAY = "BIRTHDAY"

class CalendarFactType(str, Enum):
    HOLIDAY = "HOLIDAY"
    TIME_OFF = "TIME_OFF"
    BIRTHDAY = "BIRTHDAY"
    ORDINARY = "ORDINARY"

class OvertimeRate(str, Enum):
    NORMAL = "NORMAL"      # 50%
    HOLIDAY = "HOLIDAY"    # 100% (holiday, Sunday, rostered day off, birthday)

class TimeOffType(str, Enum):
    MEDICAL_LEAVE = "MEDICAL_LEAVE"
    VACATION = "VACATION"
    PERSONAL_LEAVE = "PERSONAL_LEAVE"
    MATERNITY_LEAVE = "MATERNITY_LEAVE"
    OTHER = "OTHER"

class DsrAbsenceType(str, Enum):
    FULL_DAY = "FULL_DAY"
    HALF_DAY_MORNING = "HALF_DAY_MORNING"
    HALF_DAY_AFTERNOON = "HALF_DAY_AFTERNOON"

class ReviewFlag(str, Enum):
    MISSING_PAIR = "MISSING_PAIR"
    OUT_OF_ORDER = "OUT_OF_ORDER"
    EXTRA_PUNCHES = "EXTRA_PUNCHES"

class DaySource(str, Enum):
    NONE = "NONE"
    PUNCHES = "PUNCHES"
    MANUAL_EDIT = "MANUAL_EDIT"

class BalanceStatus(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
