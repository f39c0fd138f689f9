"""
Validation pass over an override table. Not run at import or lookup time;
the test suite runs it over CUSTOM_MAPPING.
"""

# ------------------- Packages --------------------- #
from numbers import Real
from typing import List, Mapping

from snapshot_config.config import Settings
from snapshot_config.custom_mapping import CUSTOM_MAPPING
from snapshot_config.utils.classes.SnapshotConfiguration import SnapshotConfiguration

# ------------------- Validation --------------------- #
def validate_mapping(mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING) -> List[str]:
    """
    Returns one message per entry whose precision is not a number in (MIN_PRECISION, MAX_PRECISION].
    An empty list means the table is valid.
    """
    s = Settings()
    problems: List[str] = []
    for name in sorted(mapping):
        p = mapping[name].precision
        # bool is a Real subclass but never a meaningful precision
        if isinstance(p, bool) or not isinstance(p, Real):
            problems.append(f"{name}: precision {p!r} is not a number")
        elif not (s.MIN_PRECISION < p <= s.MAX_PRECISION):
            problems.append(
                f"{name}: precision {p} outside ({s.MIN_PRECISION}, {s.MAX_PRECISION}]"
            )
    return problems

def assert_valid_mapping(mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING) -> None:
    problems = validate_mapping(mapping)
    if problems:
        raise ValueError("Invalid snapshot configuration(s):\n  " + "\n  ".join(problems))
