from __future__ import annotations

# name, registration number, CAT marks, exam marks
SAMPLE_STUDENTS: list[tuple[str, str, float, float]] = [
    ("John Doe", "BIT-001-2025", 25, 60),
    ("Jane Smith", "BIT-002-2025", 18, 45),
    ("Bob Johnson", "BIT-003-2025", 12, 30),
]
