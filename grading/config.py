"""
Configuration constants for the grade engine.

This module contains all grading tables and constants used throughout
the engine. Centralizing these makes it easy to adjust behavior when a
school's grading policy differs from the defaults.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_EXPORT_NAME = "example_export.json"


# =============================================================================
# GPA SCALES
# =============================================================================
# "4.0"        - US scale, A+ earns no extra credit
# "4.3"        - Canadian-style scale, A+ = 4.3
# "percentage" - raw percentage, no conversion

SCALE_4_0 = "4.0"
SCALE_4_3 = "4.3"
SCALE_PERCENTAGE = "percentage"
DEFAULT_SCALE = SCALE_4_0

# Highest value a grade can take on each scale. A direct course grade at or
# below the ceiling is read as grade points rather than a percentage.
SCALE_CEILINGS = {
    SCALE_4_0: 4.0,
    SCALE_4_3: 4.3,
    SCALE_PERCENTAGE: 100.0,
}


# =============================================================================
# PERCENTAGE BREAKPOINTS
# =============================================================================
# Evaluated top-down with >=. The 97 row only exists on the 4.3 scale;
# on the 4.0 scale anything >= 93 is already 4.0.

PERCENTAGE_BREAKPOINTS_4_3 = [
    (97, 4.3),
    (93, 4.0),
    (90, 3.7),
    (87, 3.3),
    (83, 3.0),
    (80, 2.7),
    (77, 2.3),
    (73, 2.0),
    (70, 1.7),
    (67, 1.3),
    (63, 1.0),
    (60, 0.7),
]

PERCENTAGE_BREAKPOINTS_4_0 = PERCENTAGE_BREAKPOINTS_4_3[1:]


# =============================================================================
# LETTER GRADE TABLES
# =============================================================================

LETTER_POINTS_4_0 = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0, "P": 0.0, "NP": 0.0, "W": 0.0, "I": 0.0,
}

LETTER_POINTS_4_3 = {
    "A+": 4.3, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0, "P": 0.0, "NP": 0.0, "W": 0.0, "I": 0.0,
}

# Letter grade as a course grade on the percentage scale. F sits at 50
# here, not 0: a failed course still reports a nominal percentage.
LETTER_POINTS_PERCENTAGE = {
    "A+": 97, "A": 93, "A-": 90,
    "B+": 87, "B": 83, "B-": 80,
    "C+": 77, "C": 73, "C-": 70,
    "D+": 67, "D": 63, "D-": 60,
    "F": 50, "P": 70, "NP": 0, "W": 0, "I": 0,
}

# Letter grade on an individual assignment, used for weighted averaging.
# Unlike the table above, F contributes 0.
ASSIGNMENT_LETTER_PERCENTAGE = {
    "A+": 97, "A": 93, "A-": 90,
    "B+": 87, "B": 83, "B-": 80,
    "C+": 77, "C": 73, "C-": 70,
    "D+": 67, "D": 63, "D-": 60,
    "F": 0,
}

# Display order, best to worst, for turning points back into letters
LETTER_ORDER = [
    "A+", "A", "A-",
    "B+", "B", "B-",
    "C+", "C", "C-",
    "D+", "D", "D-",
]


# =============================================================================
# GRADE TOKENS
# =============================================================================

# Courses carrying these tokens stay out of summary GPA and credit totals
# W = Withdrawn, I = Incomplete
EXCLUDED_GRADES = {"W", "I"}

# Placeholder shown when a course has no grade from any source
NO_GRADE = "N/A"


# =============================================================================
# COURSE DEFAULTS
# =============================================================================

DEFAULT_MAX_GRADE = 100
DEFAULT_CATEGORY = "General"
