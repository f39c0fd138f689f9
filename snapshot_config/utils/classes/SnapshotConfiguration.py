"""
Snapshot configuration for an individual test case.
"""

from dataclasses import dataclass
from typing import Dict, Union

from snapshot_config.config import Settings

@dataclass(frozen=True)
class SnapshotConfiguration:
    precision: float = Settings().DEFAULT_PRECISION # 1.0 = captured image must match the reference exactly
    use_experimental_engine: bool = False           # render with the experimental engine instead of the stable one

    def as_dict(self) -> Dict[str, Union[float, bool]]:
        return {
            "precision": self.precision,
            "use_experimental_engine": self.use_experimental_engine
        }
