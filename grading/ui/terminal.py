"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the grading package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..engines import GradeConverter
from ..models import Course, FinalGrade, FinalExamPrediction, GPASummary, GpaScale, Letter, User


class TerminalDisplay:
    """
    Pretty terminal output for grades and GPA summaries.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the dataclasses
       (RecordParser.to_record already produces the export shape).

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_BLUE = "\033[44m"

    converter = GradeConverter()

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
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_available_exports(cls, data_dir, names: list):
        """List the export files a user can pass to --export."""
        if not names:
            print(f"  {cls.DIM}No exports found in {data_dir}{cls.RESET}")
            return
        print(f"\n  {cls.BOLD}Available exports in {data_dir}:{cls.RESET}")
        for name in names:
            print(f"    • {name}")

    @classmethod
    def grade_color(cls, grade) -> str:
        """
        Color for a displayed grade.

        Letters are colored by their first character, numbers by band
        (percentage bands if above 4.3, point bands otherwise).
        """
        if isinstance(grade, str):
            first = grade[:1]
            return {
                "A": cls.GREEN,
                "B": cls.BLUE,
                "C": cls.YELLOW,
                "D": cls.MAGENTA,
                "F": cls.RED,
            }.get(first, cls.DIM)

        if grade > 4.3:
            bands = [(90, cls.GREEN), (80, cls.BLUE), (70, cls.YELLOW), (60, cls.MAGENTA)]
        else:
            bands = [(3.7, cls.GREEN), (3.0, cls.BLUE), (2.0, cls.YELLOW), (1.0, cls.MAGENTA)]
        for threshold, color in bands:
            if grade >= threshold:
                return color
        return cls.RED

    @classmethod
    def print_user_info(cls, user: User):
        """Print the account owner and their display scale."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {user.name or 'Unknown'}")
        print(f"  {cls.BOLD}Email:{cls.RESET} {user.email or 'Unknown'}")
        print(f"  {cls.BOLD}GPA Scale:{cls.RESET} {user.gpa_scale.value}")

    @classmethod
    def print_summary(cls, summary: GPASummary):
        """Print overall, semester and category GPAs."""
        scale = summary.scale or GpaScale.FOUR_POINT
        fmt = cls.converter.format_gpa

        cls.print_header(f"GPA SUMMARY ({scale.value} SCALE)")
        print(f"\n  {cls.BOLD}Overall GPA:{cls.RESET}   {cls.BG_BLUE}{cls.WHITE} {fmt(summary.overall_gpa, scale)} {cls.RESET}")
        print(f"  {cls.BOLD}Dashboard GPA:{cls.RESET} {summary.dashboard_gpa:.2f} {cls.DIM}(any graded course){cls.RESET}")
        print(f"  {cls.BOLD}Credits:{cls.RESET}       {summary.total_credits:.1f} completed")
        print(f"  {cls.BOLD}Courses:{cls.RESET}       {summary.total_courses}")

        if summary.semester_gpas:
            cls.print_subheader("By Semester")
            for term, gpa in summary.semester_gpas.items():
                print(f"  {term:<20} {fmt(gpa, scale)}")

        if summary.category_gpas:
            cls.print_subheader("By Category")
            for category, gpa in summary.category_gpas.items():
                print(f"  {category:<20} {fmt(gpa, scale)}")

    @classmethod
    def print_courses(cls, rows: list):
        """
        Print a table of courses.

        Args:
            rows: List of (Course, FinalGrade) tuples
        """
        cls.print_subheader("Courses")
        print(f"\n  {cls.BOLD}{'COURSE':<28} {'TERM':<14} {'CR':>5} {'GRADE':>8} {'POINTS':>7}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")

        for course, final in rows:
            grade = final.grade
            color = cls.grade_color(grade)
            grade_str = f"{grade:.1f}" if isinstance(grade, float) else str(grade)
            marker = f" {cls.YELLOW}*{cls.RESET}" if final.is_overridden else ""
            status = "" if course.is_completed else f" {cls.DIM}(in progress){cls.RESET}"
            print(
                f"  {course.name[:28]:<28} {course.term:<14} {course.credits:>5.1f} "
                f"{color}{grade_str:>8}{cls.RESET} {final.grade_points or 0.0:>7.2f}{marker}{status}"
            )

        if any(final.is_overridden for _, final in rows):
            print(f"\n  {cls.DIM}* grade overridden by hand{cls.RESET}")

    @classmethod
    def print_course_detail(cls, course: Course, final: FinalGrade):
        """Print one course with its assignments and grade sources."""
        cls.print_header(f"COURSE: {course.name.upper()}")
        if course.code:
            print(f"  {cls.BOLD}Code:{cls.RESET} {course.code}")
        print(f"  {cls.BOLD}Term:{cls.RESET} {course.term}")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {course.credits:.1f}")
        print(f"  {cls.BOLD}Scale:{cls.RESET} {course.gpa_scale.value}")

        if course.assignments:
            cls.print_subheader("Assignments")
            print(f"\n  {cls.BOLD}{'NAME':<28} {'TYPE':<14} {'WEIGHT':>7} {'GRADE':>8}{cls.RESET}")
            print(f"  {cls.DIM}{'-' * 60}{cls.RESET}")
            for a in course.assignments:
                value = a.grade.token if isinstance(a.grade, Letter) else f"{a.grade.value:g}"
                print(f"  {a.name[:28]:<28} {a.type.value:<14} {a.weight:>6g}% {value:>8}")

        cls.print_subheader("Grade")
        if course.calculated_grade is not None:
            print(
                f"  {cls.BOLD}Calculated:{cls.RESET} {course.calculated_grade:.1f}% → "
                f"{course.calculated_grade_letter} ({course.calculated_grade_points:.2f})"
            )
        if final.is_overridden:
            print(f"  {cls.BOLD}Override:{cls.RESET}   {cls.YELLOW}{final.grade}{cls.RESET} ({final.grade_points:.2f})")

        color = cls.grade_color(final.grade)
        print(f"  {cls.BOLD}Final:{cls.RESET}      {color}{final.grade}{cls.RESET} ({final.grade_points or 0.0:.2f} points)")

    @classmethod
    def print_prediction(cls, prediction: FinalExamPrediction):
        """Print what the student needs on the final exam."""
        cls.print_header(f"FINAL EXAM: {prediction.course_name.upper()}")
        print(f"  {cls.BOLD}Current grade:{cls.RESET} {prediction.current_grade:.1f}%")
        print(f"  {cls.BOLD}Final weight:{cls.RESET}  {prediction.final_weight:g}%")
        print(f"  {cls.BOLD}Target:{cls.RESET}        {prediction.target_grade:g}%")

        color = cls.GREEN if prediction.is_achievable else cls.RED
        print(f"\n  {cls.BOLD}Needed on final:{cls.RESET} {color}{prediction.required_score:.1f}%{cls.RESET}")
        if not prediction.is_achievable:
            print(f"  {cls.DIM}The target is out of reach even with a perfect final.{cls.RESET}")
