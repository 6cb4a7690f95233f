"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the collegeportal package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import DEFAULT_GRADE_POINTS
from ..models import CourseGrade, EventTag, GradePointTable, GradeSummary


class TerminalDisplay:
    """
    Pretty terminal output for calculator and calendar results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the returned dataclasses.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")

    @staticmethod
    def format_credits(value: float) -> str:
        """7.0 -> "7", 3.5 -> "3.5"."""
        return f"{value:g}"

    @classmethod
    def progress_bar(cls, percentage: int, width: int = 24) -> str:
        """A filled bar like ██████░░░░ for a 0-100 percentage."""
        filled = round(width * max(0, min(percentage, 100)) / 100)
        return f"{cls.MAGENTA}{'█' * filled}{cls.DIM}{'░' * (width - filled)}{cls.RESET}"

    @classmethod
    def print_grade_options(cls, table: GradePointTable = DEFAULT_GRADE_POINTS):
        """Print the grade selector legend: O (10) | A+ (9) | ..."""
        options = " | ".join(f"{grade} ({points})" for grade, points in table.grade_options())
        print(f"  {cls.DIM}Grades: {options}{cls.RESET}")

    @classmethod
    def print_subjects(cls, summary: GradeSummary, table: GradePointTable = DEFAULT_GRADE_POINTS):
        """Print the subjects table with each row's grade and the progress bar."""
        cls.print_header("SUBJECTS & GRADES")

        pct = summary.completion_percentage
        print(f"\n  {cls.BOLD}Progress:{cls.RESET} {summary.graded_count}/{summary.total_count} "
              f"{cls.progress_bar(pct)} {pct}%")

        print(f"\n  {cls.BOLD}{'CODE':<10} {'SUBJECT':<36} {'CREDITS':<8} {'GRADE'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")

        for row in summary.rows:
            cls._print_subject_row(row, table)

    @classmethod
    def _print_subject_row(cls, row: CourseGrade, table: GradePointTable):
        name = row.name if len(row.name) <= 36 else row.name[:33] + "..."
        if row.grade and row.grade in table:
            grade_str = f"{cls.GREEN}{row.grade}{cls.RESET}"
        elif row.grade:
            grade_str = f"{cls.YELLOW}{row.grade} (not counted){cls.RESET}"
        else:
            grade_str = f"{cls.DIM}—{cls.RESET}"
        print(f"  {row.code:<10} {name:<36} {str(row.credits):<8} {grade_str}")

    @classmethod
    def print_gpa(cls, summary: GradeSummary):
        """Print the GPA result block with subject/completed/credit counters."""
        cls.print_header("YOUR SEMESTER GPA")

        print(f"\n  {cls.BOLD}{cls.MAGENTA}  {summary.gpa:.2f}  {cls.RESET} {cls.DIM}Grade Point Average{cls.RESET}")
        print(f"\n  {cls.BOLD}{'Subjects':<14}{'Completed':<14}{'Total Credits'}{cls.RESET}")
        print(f"  {summary.total_count:<14}{summary.graded_count:<14}"
              f"{cls.format_credits(summary.total_credits)}")

        if not summary.is_complete:
            print(f"\n  {cls.YELLOW}⏳ {summary.total_count - summary.graded_count} subject(s) "
                  f"not graded yet; they are left out of the GPA.{cls.RESET}")
        print()

    @classmethod
    def print_hashtag(cls, hashtag: str, tag: EventTag):
        cls.print_subheader("Event Hashtag")
        print(f"  {cls.BOLD}{cls.CYAN}{hashtag}{cls.RESET}")
        cls.print_event(tag)

    @classmethod
    def print_event(cls, tag: EventTag):
        """Print one decoded event as a labelled block."""
        print(f"  {cls.BOLD}Category:{cls.RESET} {tag.category}")
        print(f"  {cls.BOLD}Name:{cls.RESET}     {tag.name}")
        print(f"  {cls.BOLD}Dates:{cls.RESET}    {tag.start_date:%d %b %Y} → {tag.end_date:%d %b %Y} "
              f"{cls.DIM}({tag.duration_days} day{'s' if tag.duration_days > 1 else ''}){cls.RESET}")

    @classmethod
    def print_calendar(cls, result: dict):
        """Print events extracted from announcements, then the rejected ones."""
        events = result.get("events", [])
        invalid = result.get("invalid", [])

        cls.print_header("EVENT CALENDAR")

        if not events:
            print(f"\n  {cls.DIM}(no events){cls.RESET}")

        current_month = None
        for tag in events:
            month = f"{tag.start_date:%B %Y}"
            if month != current_month:
                cls.print_subheader(month)
                current_month = month
            span = f"{tag.start_date:%d %b}"
            if tag.end_date != tag.start_date:
                span += f" – {tag.end_date:%d %b}"
            print(f"  {cls.GREEN}{span:<16}{cls.RESET} {cls.BOLD}{tag.name:<22}{cls.RESET} {cls.DIM}{tag.category}{cls.RESET}")

        if invalid:
            cls.print_subheader(f"Skipped {len(invalid)} announcement(s)")
            for item in invalid:
                record = item["record"]
                label = record.get("title") or record.get("hashtag", "") if isinstance(record, dict) else record
                print(f"  {cls.RED}✗{cls.RESET} {label} {cls.DIM}({item['error']}){cls.RESET}")
        print()
