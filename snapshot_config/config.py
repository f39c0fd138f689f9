"""
Configuration file for snapshot_config.
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class Settings:
    # Default comparison policy
    DEFAULT_PRECISION: float = 1.0
    PRIVATE_PREFIX: str = "Private/"

    # Sample discovery
    SAMPLES_DIR: str = "Tests/Samples"
    SAMPLE_EXTENSION: str = ".json"

    # Validation bounds: precision must lie in (MIN_PRECISION, MAX_PRECISION]
    MIN_PRECISION: float = 0.0
    MAX_PRECISION: float = 1.0
