"""
Command-Line Interface for the College Portal.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
1. CGPA CALCULATOR: Grade a semester's subjects and compute the GPA
2. DECODE HASHTAG: Read the event packed inside an announcement hashtag
3. CREATE HASHTAG: Build the hashtag for a new announcement
4. EVENT CALENDAR: List the events found in an announcements export

Run with:
    python -m collegeportal
"""

import logging

from .config import EVENT_CATEGORIES, LOG_LEVEL, SEMESTERS
from .engines import parse_date_token
from .errors import PortalError
from .portal import CollegePortal
from .ui import TerminalDisplay


def _ask(prompt: str, default: str = "") -> str:
    try:
        answer = input(prompt).strip()
    except EOFError:
        answer = ""
    return answer or default


def _load_subjects(portal: CollegePortal) -> list:
    """Load rows from a grade sheet file, or from the backend by semester."""
    source = _ask("  Grade sheet file (or 'api' to fetch a semester): ")
    if source.lower() != "api":
        return portal.load_rows(source)

    batch_year = int(_ask("  Batch year (e.g., 2022): "))
    department = _ask("  Department (e.g., CSE): ").upper()
    semester = int(_ask(f"  Semester ({SEMESTERS[0]}-{SEMESTERS[-1]}): "))
    if semester not in SEMESTERS:
        raise PortalError(f"Semester must be between {SEMESTERS[0]} and {SEMESTERS[-1]}")

    rows = portal.fetch_rows(batch_year, department, semester)
    if not rows:
        raise PortalError("No subjects found for this semester. Please contact your teacher.")
    return rows


def _run_calculator(portal: CollegePortal):
    """
    Run the CGPA calculator.

    Every subject is shown with its current grade; press Enter to keep it
    or type a grade from the table. A value the table does not know is
    kept on the row but left out of the GPA.
    """
    rows = _load_subjects(portal)

    TerminalDisplay.print_subheader("Enter grades")
    TerminalDisplay.print_grade_options(portal.table)

    for row in rows:
        label = f"{row.code} {row.name}".strip() or str(row.identifier)
        current = row.grade or "-"
        grade = _ask(f"  {label} [{current}]: ").upper()
        if grade == "-":
            row.clear_grade()
        elif grade:
            row.assign_grade(grade)
            if grade not in portal.table:
                print(f"    {TerminalDisplay.YELLOW}'{grade}' is not on the grade table; it won't count.{TerminalDisplay.RESET}")

    portal.run_cgpa(rows)


def _run_decode(portal: CollegePortal):
    text = _ask("  Hashtag: ")
    portal.check_hashtag(text)


def _run_create(portal: CollegePortal):
    print(f"\n  {TerminalDisplay.DIM}Categories: {', '.join(EVENT_CATEGORIES)}{TerminalDisplay.RESET}")
    category = _ask("  Category: ")
    title = _ask("  Event title: ")
    start = parse_date_token(_ask("  Start date (DD-MM-YYYY): "))
    end = parse_date_token(_ask("  End date (DD-MM-YYYY, Enter for same day): ", f"{start:%d-%m-%Y}"))
    portal.make_hashtag(category, title, start, end)


def _run_calendar(portal: CollegePortal):
    source = _ask("  Announcements file: ", "announcements.json")
    portal.run_calendar(source)


MODES = {
    "1": _run_calculator,
    "2": _run_decode,
    "3": _run_create,
    "4": _run_calendar,
}


def main(portal: CollegePortal = None) -> int:
    """
    Command-line interface for the college portal.

    Returns the process exit status: 0 on success, 1 if the chosen tool
    failed on bad input or a missing file.
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    portal = portal or CollegePortal()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         COLLEGE PORTAL TOOLS                                     ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 🧮 CGPA CALCULATOR - Grade your subjects                     ║")
    print("║  2. 🔎 DECODE HASHTAG  - Read an announcement's event            ║")
    print("║  3. 🏷  CREATE HASHTAG  - Tag a new announcement                  ║")
    print("║  4. 📅 EVENT CALENDAR  - Events from announcements               ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    mode = _ask(f"{TerminalDisplay.BOLD}Select mode (1-4): {TerminalDisplay.RESET}", "1")
    run = MODES.get(mode)
    if run is None:
        TerminalDisplay.print_error(f"Unknown mode: {mode}")
        return 1

    try:
        run(portal)
    except (PortalError, FileNotFoundError) as e:
        TerminalDisplay.print_error(str(e))
        return 1
    except ValueError as e:
        TerminalDisplay.print_error(f"Invalid input: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
