from datetime import date, datetime

MONDAY = date(2024, 3, 4)
WEDNESDAY = date(2024, 3, 6)
SUNDAY = date(2024, 3, 10)


def punches_on(day: date, *marks: str):
    """datetime punches for 'HH:MM' marks on the given day"""
    result = []
    for mark in marks:
        hours, minutes = mark.split(":")
        result.append(datetime(day.year, day.month, day.day, int(hours), int(minutes)))
    return result
