"""Fixed scoring tables.

Each table is a list of ``(exclusive upper bound, score)`` pairs checked in
order; a value at or above every bound scores 0. Rate tables apply only
when at least one finding exists, since zero findings always scores 5.
"""

# violations / total files
LAYERING_RATE_THRESHOLDS: list[tuple[float, int]] = [
    (0.02, 4),
    (0.05, 3),
    (0.10, 2),
    (0.20, 1),
]

# public types / all types, in percent
ENCAPSULATION_PERCENT_THRESHOLDS: list[tuple[float, int]] = [
    (20.0, 5),
    (30.0, 4),
    (40.0, 3),
    (50.0, 2),
    (60.0, 1),
]

# abstraction issues / total files
ABSTRACTION_RATE_THRESHOLDS: list[tuple[float, int]] = [
    (0.05, 4),
    (0.10, 3),
    (0.20, 2),
    (0.30, 1),
]

# cycles / total files
CYCLE_RATE_THRESHOLDS: list[tuple[float, int]] = [
    (0.01, 4),
    (0.03, 3),
    (0.05, 2),
    (0.10, 1),
]

MAX_SCORE = 5
MIN_SCORE = 0

# Composite (and per-dimension) level bands: score >= bound
LEVEL_BANDS: list[tuple[float, str]] = [
    (4.5, "Excellent"),
    (3.5, "Good"),
    (2.5, "Acceptable"),
    (1.5, "NeedsImprovement"),
    (0.5, "Poor"),
]
