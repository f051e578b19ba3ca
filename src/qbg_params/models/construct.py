from __future__ import annotations

import logging
import numbers
from typing import Any, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from qbg_params import raw
from qbg_params.errors import InvalidConfigurationError
from qbg_params.models.element import ElementTypeInput, dtype_of, object_type_of
from qbg_params.models.enums import DistanceType, ObjectType

logger = logging.getLogger(__name__)

ALIGNMENT: int = 16


def next_multiple_of_16(x: int) -> int:
    return ((x + ALIGNMENT - 1) // ALIGNMENT) * ALIGNMENT


def check_dimension(dimension: int) -> None:
    if (
        isinstance(dimension, bool)
        or not isinstance(dimension, numbers.Integral)
        or not 1 <= int(dimension) <= raw.SIZE_T_MAX
    ):
        raise InvalidConfigurationError(
            f"Invalid dimension: {dimension!r}, must be a positive integer no greater than {raw.SIZE_T_MAX}"
        )


def check_extended_dimension(extended_dimension: int, dimension: int) -> None:
    if (
        extended_dimension % ALIGNMENT != 0
        or extended_dimension < dimension
        or extended_dimension > raw.SIZE_T_MAX
    ):
        raise InvalidConfigurationError(
            f"Invalid extended_dimension: {extended_dimension}, must be a multiple of "
            f"{ALIGNMENT} greater or equal to dimension ({dimension}) and at most {raw.SIZE_T_MAX}"
        )


class ConstructParams(BaseModel):
    """
    Construction parameters of a QBG index: padded memory layout, quantization
    granularity and element/distance typing.

    Instances are immutable. Every ``with_*`` override returns a new instance;
    a rejected override raises and leaves the original untouched.

        params = (
            ConstructParams.create(100, np.float32)
            .with_extended_dimension(128)
            .with_number_of_subvectors(4)
        )
        engine_params = params.into_raw()

    ``data_type`` is fixed by the element type given to `create` and has no
    override.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    extended_dimension: int = Field(..., gt=0, le=raw.SIZE_T_MAX)
    dimension: int = Field(..., gt=0, le=raw.SIZE_T_MAX)
    number_of_subvectors: int = Field(1, ge=0, le=raw.SIZE_T_MAX)
    number_of_blobs: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    internal_data_type: ObjectType
    data_type: ObjectType
    distance_type: DistanceType = DistanceType.L2

    @model_validator(mode="after")
    def extended_dimension_aligned(self) -> "ConstructParams":
        check_extended_dimension(self.extended_dimension, self.dimension)
        return self

    @classmethod
    def create(cls, dimension: int, element_type: ElementTypeInput = np.float32) -> "ConstructParams":
        """Derive defaults for `dimension` components of `element_type`.

        The extended dimension is the smallest multiple of 16 not below
        `dimension`. A dimension below 1 is rejected.
        """
        object_type = object_type_of(element_type)
        try:
            check_dimension(dimension)
        except InvalidConfigurationError:
            logger.warning("rejected dimension %r", dimension)
            raise
        dimension = int(dimension)
        extended_dimension = next_multiple_of_16(dimension)
        try:
            check_extended_dimension(extended_dimension, dimension)
        except InvalidConfigurationError:
            logger.warning("rejected dimension %r: padded length overflows size_t", dimension)
            raise
        return cls(
            extended_dimension=extended_dimension,
            dimension=dimension,
            internal_data_type=object_type,
            data_type=object_type,
        )

    @property
    def element_dtype(self) -> np.dtype:
        """numpy dtype of the input vectors, matching ``data_type``."""
        return dtype_of(self.data_type)

    def _replace(self, **changes: Any) -> "ConstructParams":
        return type(self).model_validate({**dict(self), **changes})

    def with_extended_dimension(self, extended_dimension: int) -> "ConstructParams":
        try:
            check_extended_dimension(extended_dimension, self.dimension)
        except InvalidConfigurationError:
            logger.warning(
                "rejected extended_dimension %s for dimension %s", extended_dimension, self.dimension
            )
            raise
        return self._replace(extended_dimension=extended_dimension)

    def with_number_of_subvectors(self, number_of_subvectors: int) -> "ConstructParams":
        return self._replace(number_of_subvectors=number_of_subvectors)

    def with_number_of_blobs(self, number_of_blobs: int) -> "ConstructParams":
        return self._replace(number_of_blobs=number_of_blobs)

    def with_internal_data_type(self, internal_data_type: Union[ObjectType, int]) -> "ConstructParams":
        return self._replace(internal_data_type=ObjectType.from_code(internal_data_type))

    def with_distance_type(self, distance_type: Union[DistanceType, int]) -> "ConstructParams":
        return self._replace(distance_type=DistanceType.from_code(distance_type))

    def into_raw(self) -> raw.QBGConstructionParameters:
        """Copy into the engine's fixed-layout record. Does not re-validate."""
        logger.debug("finalizing construction parameters %s", self)
        return raw.QBGConstructionParameters(
            extended_dimension=self.extended_dimension,
            dimension=self.dimension,
            number_of_subvectors=self.number_of_subvectors,
            number_of_blobs=self.number_of_blobs,
            internal_data_type=self.internal_data_type.code,
            data_type=self.data_type.code,
            distance_type=self.distance_type.code,
        )

    @classmethod
    def from_raw(cls, record: raw.QBGConstructionParameters) -> "ConstructParams":
        """Rebuild parameters from an engine record, decoding every code."""
        check_dimension(record.dimension)
        check_extended_dimension(record.extended_dimension, record.dimension)
        return cls(
            extended_dimension=record.extended_dimension,
            dimension=record.dimension,
            number_of_subvectors=record.number_of_subvectors,
            number_of_blobs=record.number_of_blobs,
            internal_data_type=ObjectType.from_code(record.internal_data_type),
            data_type=ObjectType.from_code(record.data_type),
            distance_type=DistanceType.from_code(record.distance_type),
        )
