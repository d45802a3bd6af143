"""
Command-line front end for the meal log.

Usage:
    meal-tracker add NAME CALORIES PROTEIN [--meal TYPE]
    meal-tracker edit ID NAME CALORIES PROTEIN [--meal TYPE]
    meal-tracker delete ID
    meal-tracker today
    meal-tracker history
    meal-tracker day YYYY-MM-DD
    meal-tracker week
    meal-tracker goals [--calories N] [--protein N]
                       [--step-calories up|down] [--step-protein up|down]
"""

import argparse
import sys
from collections.abc import Sequence
from datetime import date, tzinfo
from uuid import UUID

from meal_tracker.app_logging import configure_logging
from meal_tracker.containers import AppContainer, build_container
from meal_tracker.domain.entries import (
    DayGroup,
    DaySummary,
    FoodEntry,
    MealType,
    NutritionTotals,
)
from meal_tracker.domain.goals import Goals
from meal_tracker.errors import (
    EntryNotFoundError,
    EntryReadError,
    EntryValidationError,
)
from meal_tracker.services import aggregation
from meal_tracker.services.journal import SaveResult, TodayView
from meal_tracker.services.mutations import find_entry, parse_entry_form

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_SAVE_FAILED = 2

STEP_DIRECTIONS = {"up": 1, "down": -1}


def cmd_add(args: argparse.Namespace, container: AppContainer) -> int:
    """Log a new meal."""
    form = parse_entry_form(args.name, args.calories, args.protein, args.meal)
    entry, result = container.entry_log.add(form)
    print(f"Added {_format_entry(entry)}")
    print(f"id: {entry.id}")
    return _save_status(result)


def cmd_edit(args: argparse.Namespace, container: AppContainer) -> int:
    """Correct an existing meal, keeping its timestamp."""
    entry_id = _parse_entry_id(args.entry_id)
    existing = find_entry(container.entry_log.entries, entry_id)
    if existing is None:
        raise EntryNotFoundError(entry_id)
    meal = args.meal or existing.meal_type
    form = parse_entry_form(args.name, args.calories, args.protein, meal)
    result = container.entry_log.edit(entry_id, form)
    print(f"Updated {entry_id}")
    return _save_status(result)


def cmd_delete(args: argparse.Namespace, container: AppContainer) -> int:
    """Delete a meal by id."""
    entry_id = _parse_entry_id(args.entry_id)
    result = container.entry_log.delete(entry_id)
    print(f"Deleted {entry_id}")
    return _save_status(result)


def cmd_today(args: argparse.Namespace, container: AppContainer) -> int:
    """Show today's meals and goal progress."""
    goals = container.goals_service.get_goals()
    log = container.entry_log
    print(_format_today(log.today(goals), goals, log.tz))
    return EXIT_OK


def cmd_history(args: argparse.Namespace, container: AppContainer) -> int:
    """Show daily totals, most recent day first."""
    print(_format_history(container.entry_log.history()))
    return EXIT_OK


def cmd_day(args: argparse.Namespace, container: AppContainer) -> int:
    """Show the meals logged on one day."""
    try:
        day = date.fromisoformat(args.day)
    except ValueError as exc:
        raise EntryValidationError("day", "must be YYYY-MM-DD") from exc
    log = container.entry_log
    entries = sorted(
        aggregation.filter_by_day(log.entries, day, log.tz),
        key=lambda entry: entry.date,
    )
    day_total = aggregation.day_totals(log.entries, day, log.tz)
    print(_format_day(day, entries, day_total))
    return EXIT_OK


def cmd_week(args: argparse.Namespace, container: AppContainer) -> int:
    """Show which of the last seven days met both goals."""
    goals = container.goals_service.get_goals()
    print(_format_week(container.entry_log.week(goals), goals))
    return EXIT_OK


def cmd_goals(args: argparse.Namespace, container: AppContainer) -> int:
    """Show or change the daily goals."""
    service = container.goals_service
    if args.calories is not None:
        service.set_calorie_goal(args.calories)
    if args.protein is not None:
        service.set_protein_goal(args.protein)
    if args.step_calories is not None:
        service.step_calorie_goal(STEP_DIRECTIONS[args.step_calories])
    if args.step_protein is not None:
        service.step_protein_goal(STEP_DIRECTIONS[args.step_protein])
    goals = service.get_goals()
    print(f"Calorie goal: {goals.calories} kcal")
    print(f"Protein goal: {goals.protein} g")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meal-tracker", description="Log meals and track daily goals."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    meal_choices = [meal.value for meal in MealType]

    add_parser = subparsers.add_parser("add", help="Log a meal")
    add_parser.add_argument("name")
    add_parser.add_argument("calories")
    add_parser.add_argument("protein")
    add_parser.add_argument("--meal", choices=meal_choices, default="breakfast")
    add_parser.set_defaults(func=cmd_add)

    edit_parser = subparsers.add_parser("edit", help="Correct a logged meal")
    edit_parser.add_argument("entry_id")
    edit_parser.add_argument("name")
    edit_parser.add_argument("calories")
    edit_parser.add_argument("protein")
    edit_parser.add_argument("--meal", choices=meal_choices)
    edit_parser.set_defaults(func=cmd_edit)

    delete_parser = subparsers.add_parser("delete", help="Delete a logged meal")
    delete_parser.add_argument("entry_id")
    delete_parser.set_defaults(func=cmd_delete)

    subparsers.add_parser("today", help="Today's totals").set_defaults(
        func=cmd_today
    )
    subparsers.add_parser("history", help="Totals per day").set_defaults(
        func=cmd_history
    )

    day_parser = subparsers.add_parser("day", help="Meals logged on a day")
    day_parser.add_argument("day", help="YYYY-MM-DD")
    day_parser.set_defaults(func=cmd_day)

    subparsers.add_parser("week", help="Last seven days vs goals").set_defaults(
        func=cmd_week
    )

    goals_parser = subparsers.add_parser("goals", help="Show or set goals")
    goals_parser.add_argument("--calories", type=int)
    goals_parser.add_argument("--protein", type=int)
    goals_parser.add_argument("--step-calories", choices=list(STEP_DIRECTIONS))
    goals_parser.add_argument("--step-protein", choices=list(STEP_DIRECTIONS))
    goals_parser.set_defaults(func=cmd_goals)

    return parser


def main(
    argv: Sequence[str] | None = None, container: AppContainer | None = None
) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    resolved = container or build_container()
    configure_logging(resolved.settings.log_level)
    try:
        resolved.entry_log.load()
        return args.func(args, resolved)
    except (EntryValidationError, EntryNotFoundError, EntryReadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID


def _parse_entry_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as exc:
        raise EntryValidationError("id", "must be a UUID") from exc


def _save_status(result: SaveResult) -> int:
    if result.saved:
        return EXIT_OK
    print(f"Warning: {result.error}; changes are not saved", file=sys.stderr)
    return EXIT_SAVE_FAILED


def _format_entry(entry: FoodEntry) -> str:
    return (
        f"{entry.name}: {entry.calories} kcal, {entry.protein} g, "
        f"{entry.meal_type.display_name}"
    )


def _format_today(view: TodayView, goals: Goals, tz: tzinfo | None = None) -> str:
    """Format today's totals with goal progress."""
    lines = [
        "Today:",
        f"Calories: {view.totals.calories} / {goals.calories} kcal "
        f"({view.calorie_progress:.0%})",
        f"Protein: {view.totals.protein} / {goals.protein} g "
        f"({view.protein_progress:.0%})",
    ]
    if not view.entries:
        lines.append("No entries yet. Use 'add' to log your first meal.")
        return "\n".join(lines)
    lines.append("Meals:")
    for entry in view.entries:
        logged_at = entry.date.astimezone(tz)
        lines.append(f"- {logged_at.strftime('%H:%M')} {_format_entry(entry)}")
    return "\n".join(lines)


def _format_history(groups: list[DayGroup]) -> str:
    """Format per-day totals, most recent first."""
    if not groups:
        return "No history yet. Log some meals first."
    lines = ["History:"]
    for group in groups:
        lines.append(
            f"- {group.day}: {group.totals.calories} kcal, "
            f"{group.totals.protein} g protein ({len(group.entries)} meals)"
        )
    return "\n".join(lines)


def _format_day(
    day: date, entries: list[FoodEntry], day_total: NutritionTotals
) -> str:
    """Format one day's meals with totals."""
    lines = [
        day.strftime("%A, %B %d, %Y"),
        f"{day_total.calories} kcal, {day_total.protein} g protein",
    ]
    if not entries:
        lines.append("No entries for this day.")
        return "\n".join(lines)
    for entry in entries:
        lines.append(f"- {entry.id} {_format_entry(entry)}")
    return "\n".join(lines)


def _format_week(summaries: list[DaySummary], goals: Goals) -> str:
    """Format the seven-day goal summary."""
    met = sum(1 for summary in summaries if summary.met_goal)
    lines = [
        f"Goals met on {met} of {len(summaries)} days "
        f"({goals.calories} kcal, {goals.protein} g):"
    ]
    for summary in summaries:
        mark = "met" if summary.met_goal else "missed"
        lines.append(
            f"- {summary.day} {summary.day.strftime('%a')}: {mark} "
            f"({summary.totals.calories} kcal, {summary.totals.protein} g)"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
