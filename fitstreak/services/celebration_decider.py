"""Pick the one celebration a user action should surface.

Priority, highest first:

1. master streak: all three weekly goals were just completed;
2. category goal: one line per category that was just completed;
3. personal records: a single combined toast, only when no goal was
   completed by the same action.

A higher priority celebration swallows everything below it, so an action
never produces more than one popup.
"""

import logging
from typing import List, Optional

from fitstreak.models.activity import GoalCategory
from fitstreak.schemas.records import (
    Celebration,
    CelebrationDisplay,
    CelebrationKind,
    RecordBroken,
    StreakEvent,
    StreakEvents,
)

logger = logging.getLogger(__name__)

PRIORITY_MASTER = 1
PRIORITY_CATEGORY = 2
PRIORITY_RECORD = 3

# (goal complete emoji, streak milestone emoji)
CATEGORY_EMOJI = {
    GoalCategory.STRENGTH: ("🏋️", "💪"),
    GoalCategory.CARDIO: ("🏃", "🔥"),
    GoalCategory.RECOVERY: ("🧊", "❄️"),
}

COUNT_WORDS = {2: "Two", 3: "Three", 4: "Four", 5: "Five"}


def category_message(event: StreakEvent) -> str:
    name = event.category.value
    complete_emoji, milestone_emoji = CATEGORY_EMOJI[event.category]
    if event.record_breaking:
        return f"New Record: {event.value} Week {name} Streak! 🏆"
    if event.milestone:
        return f"{event.value} Week {name} Streak! {milestone_emoji}"
    return f"{name} goal complete! {complete_emoji}"


def master_message(event: StreakEvent) -> str:
    # A first week is always a "record"; don't call it one
    if event.record_breaking and event.value > 1:
        return f"New Record: {event.value} Week Master Streak! 🏆"
    if event.milestone:
        return f"{event.value} Week Master Streak! 🔥"
    return "Week complete! 🔥"


def records_title(count: int) -> str:
    if count == 1:
        return "New Record!"
    return f"{COUNT_WORDS.get(count, count)} New Records!"


def decide(streak_events: StreakEvents, record_events: List[RecordBroken]) -> Optional[Celebration]:
    if streak_events.master is not None:
        master = streak_events.master
        record_breaking = streak_events.record_breaking
        celebration = Celebration(
            kind=CelebrationKind.MASTER,
            priority=PRIORITY_MASTER,
            display=CelebrationDisplay.FULLSCREEN,
            title="Week Complete!",
            message=master_message(master),
            details=[category_message(e) for e in streak_events.categories],
            categories=[e.category for e in streak_events.categories],
            streak=master.value,
            record_breaking=record_breaking,
        )
    elif streak_events.categories:
        events = streak_events.categories
        lines = [category_message(e) for e in events]
        title = f"{events[0].category.value} Goal!" if len(events) == 1 else "Goals Complete!"
        celebration = Celebration(
            kind=CelebrationKind.CATEGORY,
            priority=PRIORITY_CATEGORY,
            display=CelebrationDisplay.FULLSCREEN,
            title=title,
            message="\n".join(lines),
            details=lines,
            categories=[e.category for e in events],
            streak=events[0].value if len(events) == 1 else None,
            record_breaking=any(e.record_breaking for e in events),
        )
    else:
        announced = [r.message for r in record_events if r.announce]
        if not announced:
            return None
        celebration = Celebration(
            kind=CelebrationKind.RECORD,
            priority=PRIORITY_RECORD,
            display=CelebrationDisplay.TOAST,
            title=records_title(len(announced)),
            message="\n".join(announced),
            details=announced,
            record_breaking=True,
        )

    logger.info("Celebration %s: %s", celebration.kind.value, celebration.title)
    return celebration
