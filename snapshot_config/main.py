"""
Main module for snapshot_config.

Resolves every sample under the samples directory and prints the resulting
configuration table, so override changes can be reviewed before a snapshot run.
"""
import sys
from typing import Mapping, Optional

import pandas as pd

from snapshot_config.config import Settings
from snapshot_config.custom_mapping import CUSTOM_MAPPING
from snapshot_config.utils.classes.SnapshotConfiguration import SnapshotConfiguration
from snapshot_config.utils.helpers import iter_sample_files, sample_name_for_path
from snapshot_config.utils.validation.validation_helpers import validate_mapping
from snapshot_config.utils.analysis.analysis_helpers import (
    configurations_to_df,
    engine_summary
)

def main(
    samples_dir: Optional[str] = None,
    mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING,
) -> pd.DataFrame:
    # --------------------- Setup -------------------- #
    s = Settings()
    root = samples_dir or s.SAMPLES_DIR

    # -------------------- Checking overrides ----------------------- #
    for problem in validate_mapping(mapping):
        print(f"[snapshot-config] Warning: {problem}")

    # -------------------- Resolving samples ----------------------- #
    names = [sample_name_for_path(p, root) for p in iter_sample_files(root, s.SAMPLE_EXTENSION)]
    print(f"[snapshot-config] Found {len(names)} samples under {root}")
    df = configurations_to_df(names, mapping)

    # -------------------- Report ---------------------------------- #
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(df.to_string(index=False))
        print(engine_summary(df).to_string(index=False))

    return df


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else None)
