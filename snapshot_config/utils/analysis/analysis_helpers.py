"""
Helper functions for reporting which configuration each sample resolves to.
"""

# ----------------------- Packages ----------------------- #
from typing import Iterable, List, Mapping

import pandas as pd

from snapshot_config.custom_mapping import CUSTOM_MAPPING
from snapshot_config.resolver import for_sample, source_for_sample
from snapshot_config.utils.classes.SnapshotConfiguration import SnapshotConfiguration

COLUMNS = ["sample", "precision", "use_experimental_engine", "source"]

# ----------------------- Functions ----------------------- #
def configurations_to_df(
    sample_names: Iterable[str],
    mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING,
) -> pd.DataFrame:
    """
    One row per sample with its resolved configuration and the rule that produced it
    ('custom', 'private' or 'default').
    """
    rows: List[dict] = []
    for name in sample_names:
        row = {"sample": name}
        row.update(for_sample(name, mapping).as_dict())
        row["source"] = source_for_sample(name, mapping)
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)

def engine_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sample count and lowest precision per (engine, source) group.
    """
    if df.empty:
        return pd.DataFrame(columns=["use_experimental_engine", "source", "n_samples", "min_precision"])
    out = (
        df.groupby(["use_experimental_engine", "source"])
        .agg(n_samples=("sample", "count"), min_precision=("precision", "min"))
        .reset_index()
    )
    return out
