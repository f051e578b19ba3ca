"""
Validated construction and build parameters for QBG quantized vector indexes.
"""

from qbg_params.errors import (
    InvalidConfigurationError,
    QbgParamsError,
    UnrecognizedCodeError,
    UnsupportedElementTypeError,
)
from qbg_params.models import (
    BuildParams,
    ClusteringInitMode,
    ConstructParams,
    DistanceType,
    IndexConfig,
    ObjectType,
)

__version__ = "0.1.0"

__all__ = [
    "BuildParams",
    "ClusteringInitMode",
    "ConstructParams",
    "DistanceType",
    "IndexConfig",
    "InvalidConfigurationError",
    "ObjectType",
    "QbgParamsError",
    "UnrecognizedCodeError",
    "UnsupportedElementTypeError",
]
