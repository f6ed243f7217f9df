"""
GPA Tracker Grade Engine
========================

Course grade and GPA calculation for a student GPA tracker.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │  RecordParser   │  │      GradeConverter         │  │
│  │  (I/O)      │  │ (grade variants)│  │ (letters, %, points, scales)│  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌──────────────────────┐ ┌──────────────────────┐ ┌─────────────────┐  │
│  │  CourseGradeEngine   │ │ GPAAggregationEngine │ │ GradePrediction │  │
│  │ (weighted avg,       │ │ (overall, semester,  │ │ Engine          │  │
│  │  overrides)          │ │  category, dashboard)│ │ (final exam)    │  │
│  └──────────────────────┘ └──────────────────────┘ └─────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          GPATracker                                      │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

grading/
├── __init__.py          # This file - main exports
├── config.py            # Grade tables and scale constants
├── tracker.py           # GPATracker orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── grade.py         # GpaScale, Letter, Percentage, Points, FinalGrade
│   ├── course.py        # Course, Assignment, AssignmentType, User
│   └── summary.py       # GPASummary, FinalExamPrediction
│
├── data/                # Export loading and parsing
│   ├── loader.py        # DataLoader
│   └── parser.py        # RecordParser
│
├── engines/             # Grade and GPA engines
│   ├── conversion.py    # GradeConverter
│   ├── course_grade.py  # CourseGradeEngine
│   ├── aggregation.py   # GPAAggregationEngine
│   └── prediction.py    # GradePredictionEngine
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

Library use:

    from grading import CourseGradeEngine, GPAAggregationEngine, RecordParser

    parser = RecordParser()
    course = parser.parse_course({
        "name": "Calculus I", "credits": 4, "gpaScale": "4.0",
        "semester": "Fall", "year": 2024, "isCompleted": True,
        "assignments": [
            {"name": "Midterm", "weight": 50, "grade": 90},
            {"name": "Final", "weight": 50, "grade": 70},
        ],
    })

    engine = CourseGradeEngine()
    engine.recompute(course)        # calculated_grade 80.0, 2.7 points
    engine.get_final_grade(course)  # FinalGrade("B-", 2.7, False)

    GPAAggregationEngine(engine).calculate_gpa([course])

Running from command line:

    python -m grading summary
    python -m grading override "Calculus I" A- --write

"""

# Version
__version__ = "1.0.0"

# Main exports
from .tracker import GPATracker
from .cli import main

# Model exports (for programmatic use)
from .models import (
    GpaScale,
    Letter,
    Percentage,
    Points,
    Grade,
    FinalGrade,
    Assignment,
    AssignmentType,
    Course,
    User,
    GPASummary,
    FinalExamPrediction,
)

# Engine exports
from .engines import (
    GradeConverter,
    CourseGradeEngine,
    GPAAggregationEngine,
    GradePredictionEngine,
)

# Data exports
from .data import DataLoader, RecordParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    EXCLUDED_GRADES,
    NO_GRADE,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GPATracker",
    "main",
    # Models
    "GpaScale",
    "Letter",
    "Percentage",
    "Points",
    "Grade",
    "FinalGrade",
    "Assignment",
    "AssignmentType",
    "Course",
    "User",
    "GPASummary",
    "FinalExamPrediction",
    # Engines
    "GradeConverter",
    "CourseGradeEngine",
    "GPAAggregationEngine",
    "GradePredictionEngine",
    # Data
    "DataLoader",
    "RecordParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "EXCLUDED_GRADES",
    "NO_GRADE",
]
