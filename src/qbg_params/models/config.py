from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from qbg_params.models.build import BuildParams
from qbg_params.models.construct import ConstructParams
from qbg_params.models.element import object_type_of
from qbg_params.models.enums import DistanceType
from qbg_params.settings import settings

ElementTypeName = Literal["uint8", "float32", "float16"]
DistanceName = Literal["l2"]

_DISTANCES = {"l2": DistanceType.L2}


class IndexConfig(BaseModel):
    """Human-supplied QBG index settings, resolved into engine parameters."""

    model_config = ConfigDict(extra="forbid")

    dimension: int = Field(..., gt=0)
    element_type: ElementTypeName = Field(default_factory=lambda: settings.default_element_type)
    extended_dimension: Optional[int] = Field(None, gt=0)
    number_of_subvectors: int = Field(1, ge=1)
    number_of_blobs: int = Field(0, ge=0)
    internal_element_type: Optional[ElementTypeName] = None
    distance: DistanceName = "l2"
    build: BuildParams = Field(default_factory=BuildParams)

    def to_construct_params(self) -> ConstructParams:
        params = ConstructParams.create(self.dimension, self.element_type)
        if self.extended_dimension is not None:
            params = params.with_extended_dimension(self.extended_dimension)
        params = params.with_number_of_subvectors(self.number_of_subvectors)
        params = params.with_number_of_blobs(self.number_of_blobs)
        if self.internal_element_type is not None:
            params = params.with_internal_data_type(object_type_of(self.internal_element_type))
        return params.with_distance_type(_DISTANCES[self.distance])

    def to_build_params(self) -> BuildParams:
        return self.build
