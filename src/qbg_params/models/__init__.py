# Parameter models package

from .build import BuildParams
from .config import IndexConfig
from .construct import ConstructParams
from .element import SUPPORTED_ELEMENT_TYPES, dtype_of, object_type_of
from .enums import ClusteringInitMode, DistanceType, ObjectType, normalize_clustering_init_mode

__all__ = [
    "BuildParams",
    "ClusteringInitMode",
    "ConstructParams",
    "DistanceType",
    "IndexConfig",
    "ObjectType",
    "SUPPORTED_ELEMENT_TYPES",
    "dtype_of",
    "normalize_clustering_init_mode",
    "object_type_of",
]
