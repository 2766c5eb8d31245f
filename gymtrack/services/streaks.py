from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from gymtrack.schemas import WorkoutSession

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


@dataclass
class DayStreaks:
    current: int
    longest: int


def workout_dates(sessions: Iterable[WorkoutSession]) -> list[date]:
    """Distinct session dates, oldest first."""
    return sorted({s.date for s in sessions})


def day_streaks(dates: Iterable[date], today: date) -> DayStreaks:
    """
    Current streak walks back from today. A single missing day (today, or a rest
    day between two workouts) does not end the walk; two missing days in a row do.
    Longest streak is the longest run of back-to-back calendar days, no rest days.
    """
    ordered = sorted(set(dates))
    past = [d for d in ordered if d <= today]

    current = 0
    check = today
    i = len(past) - 1
    while i >= 0:
        gap = (check - past[i]).days
        if gap == 0:
            current += 1
            check -= ONE_DAY
            i -= 1
        elif gap == 1:
            # rest day: step back once and re-check the same workout date
            check -= ONE_DAY
        else:
            break

    longest = 0
    run = 0
    previous: date | None = None
    for d in ordered:
        run = run + 1 if previous is not None and (d - previous).days == 1 else 1
        longest = max(longest, run)
        previous = d

    return DayStreaks(current=current, longest=longest)


def week_start(d: date) -> date:
    """Monday of the ISO week containing ``d``."""
    return d - timedelta(days=d.weekday())


def week_streak(sessions: Iterable[WorkoutSession], workouts_per_week: int, today: date) -> int:
    """
    Count consecutive weeks, ending with the current one, whose session count
    meets the weekly target. The current week counts only once it qualifies.
    """
    target = max(1, workouts_per_week)
    counts = Counter(week_start(s.date) for s in sessions)

    streak = 0
    week = week_start(today)
    while counts.get(week, 0) >= target:
        streak += 1
        week -= ONE_WEEK
    return streak


def this_week_count(dates: Iterable[date], today: date) -> int:
    """Distinct workout days in the Sunday-to-Saturday week containing today."""
    sunday = today - timedelta(days=(today.weekday() + 1) % 7)
    saturday = sunday + timedelta(days=6)
    return len({d for d in dates if sunday <= d <= saturday})
