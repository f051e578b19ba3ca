from __future__ import annotations

import numbers
from enum import IntEnum
from typing import Dict, Mapping, Optional, Union

from qbg_params.errors import UnrecognizedCodeError


class _CodedEnum(IntEnum):
    """IntEnum whose integer value is the code the engine expects."""

    @classmethod
    def from_code(cls, code: int):
        # bool is an int subclass; True must not decode to the member with code 1
        if isinstance(code, bool) or not isinstance(code, numbers.Integral):
            raise UnrecognizedCodeError(cls.__name__, code)
        try:
            return cls(int(code))
        except ValueError:
            raise UnrecognizedCodeError(cls.__name__, code) from None

    @property
    def code(self) -> int:
        return int(self.value)


class ObjectType(_CodedEnum):
    """Storage type of a vector component."""

    UINT8 = 0
    FLOAT = 1
    FLOAT16 = 2


class DistanceType(_CodedEnum):
    L2 = 1


class ClusteringInitMode(_CodedEnum):
    """Initial centroid selection for the k-means phases."""

    HEAD = 0
    RANDOM = 1
    KMEANS_PLUS_PLUS = 2
    RANDOM_FIXED_SEED = 3
    KMEANS_PLUS_PLUS_FIXED_SEED = 4
    BEST = 5


ClusteringInitModeInput = Union[ClusteringInitMode, int, str]

CLUSTERING_INIT_MODE_ALIASES: Mapping[str, ClusteringInitMode] = {
    "head": ClusteringInitMode.HEAD,
    "random": ClusteringInitMode.RANDOM,
    "kmeans++": ClusteringInitMode.KMEANS_PLUS_PLUS,
    "kmeanspp": ClusteringInitMode.KMEANS_PLUS_PLUS,
    "kmeans_plus_plus": ClusteringInitMode.KMEANS_PLUS_PLUS,
    "random_fixed_seed": ClusteringInitMode.RANDOM_FIXED_SEED,
    "kmeans++_fixed_seed": ClusteringInitMode.KMEANS_PLUS_PLUS_FIXED_SEED,
    "kmeanspp_fixed_seed": ClusteringInitMode.KMEANS_PLUS_PLUS_FIXED_SEED,
    "kmeans_plus_plus_fixed_seed": ClusteringInitMode.KMEANS_PLUS_PLUS_FIXED_SEED,
    "best": ClusteringInitMode.BEST,
}


def normalize_clustering_init_mode(
    mode: ClusteringInitModeInput,
    *,
    aliases: Optional[Mapping[str, ClusteringInitMode]] = None,
) -> ClusteringInitMode:
    """Normalize a member, integer code or name into a `ClusteringInitMode`.

    Names are matched case-insensitively, with ``-`` and spaces treated as
    ``_``. Extra aliases may be supplied on top of the built-in ones.
    """
    if isinstance(mode, ClusteringInitMode):
        return mode
    if isinstance(mode, str):
        alias_map: Dict[str, ClusteringInitMode] = dict(CLUSTERING_INIT_MODE_ALIASES)
        alias_map.update({key.lower(): value for key, value in (aliases or {}).items()})
        key = mode.strip().lower().replace("-", "_").replace(" ", "_")
        if key in alias_map:
            return alias_map[key]
        raise UnrecognizedCodeError(ClusteringInitMode.__name__, mode)
    return ClusteringInitMode.from_code(mode)
