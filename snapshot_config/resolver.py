"""
Resolves the snapshot configuration for a sample name.
"""
# ----------------------- Packages ----------------------- #
from typing import Mapping, Tuple

from snapshot_config.config import Settings
from snapshot_config.custom_mapping import (
    CUSTOM_MAPPING,
    DEFAULT,
    DEFAULT_FOR_PRIVATE_SAMPLES
)
from snapshot_config.utils.classes.SnapshotConfiguration import SnapshotConfiguration

PRIVATE_PREFIX = Settings().PRIVATE_PREFIX

# ----------------------- Main ----------------------- #
def _resolve(
    sample_name: str,
    mapping: Mapping[str, SnapshotConfiguration],
) -> Tuple[SnapshotConfiguration, str]:
    """(configuration, source) where source is 'custom', 'private' or 'default'."""
    if sample_name in mapping:
        return mapping[sample_name], "custom"
    if sample_name.startswith(PRIVATE_PREFIX):
        return DEFAULT_FOR_PRIVATE_SAMPLES, "private"
    return DEFAULT, "default"


def for_sample(
    sample_name: str,
    mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING,
) -> SnapshotConfiguration:
    """
    Returns the configuration to use for the given sample.
    An exact entry in `mapping` wins; otherwise `Private/` samples get the
    experimental engine and everything else gets DEFAULT. Never raises.
    :param sample_name: Sample path relative to the samples root, without extension.
    :param mapping: Override table to consult. Defaults to CUSTOM_MAPPING.
    :return: The effective SnapshotConfiguration.
    """
    return _resolve(sample_name, mapping)[0]


def source_for_sample(
    sample_name: str,
    mapping: Mapping[str, SnapshotConfiguration] = CUSTOM_MAPPING,
) -> str:
    """Which branch of for_sample applies: 'custom', 'private' or 'default'."""
    return _resolve(sample_name, mapping)[1]
