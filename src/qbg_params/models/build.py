from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qbg_params import raw
from qbg_params.models.enums import (
    ClusteringInitMode,
    ClusteringInitModeInput,
    normalize_clustering_init_mode,
)

logger = logging.getLogger(__name__)


class BuildParams(BaseModel):
    """
    Build parameters of a QBG index.

    Hierarchical clustering (three levels; the third level is the leaf
    assignment and has no object count):
      - hierarchical_clustering_init_mode
      - number_of_first_objects / number_of_first_clusters
      - number_of_second_objects / number_of_second_clusters
      - number_of_third_clusters

    Optimization (rotation and subvector codebooks):
      - number_of_objects, number_of_subvectors
      - optimization_clustering_init_mode
      - rotation_iteration, subvector_iteration, number_of_matrices
      - rotation, repositioning

    No combination of values is rejected; fields are only type-checked.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # hierarchical kmeans
    hierarchical_clustering_init_mode: ClusteringInitMode = ClusteringInitMode.KMEANS_PLUS_PLUS
    number_of_first_objects: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    number_of_first_clusters: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    number_of_second_objects: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    number_of_second_clusters: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    number_of_third_clusters: int = Field(0, ge=0, le=raw.SIZE_T_MAX)
    # optimization
    number_of_objects: int = Field(1000, ge=0, le=raw.SIZE_T_MAX)
    number_of_subvectors: int = Field(1, ge=0, le=raw.SIZE_T_MAX)
    optimization_clustering_init_mode: ClusteringInitMode = ClusteringInitMode.KMEANS_PLUS_PLUS
    rotation_iteration: int = Field(2000, ge=0, le=raw.SIZE_T_MAX)
    subvector_iteration: int = Field(400, ge=0, le=raw.SIZE_T_MAX)
    number_of_matrices: int = Field(3, ge=0, le=raw.SIZE_T_MAX)
    rotation: bool = True
    repositioning: bool = False

    @field_validator("hierarchical_clustering_init_mode", "optimization_clustering_init_mode", mode="before")
    @classmethod
    def normalize_init_mode(cls, v: Any) -> ClusteringInitMode:
        # accepts names such as "kmeans++" in addition to members and codes
        return normalize_clustering_init_mode(v)

    def _replace(self, **changes: Any) -> "BuildParams":
        return type(self).model_validate({**dict(self), **changes})

    def with_hierarchical_clustering_init_mode(self, mode: ClusteringInitModeInput) -> "BuildParams":
        return self._replace(hierarchical_clustering_init_mode=normalize_clustering_init_mode(mode))

    def with_number_of_first_objects(self, number_of_first_objects: int) -> "BuildParams":
        return self._replace(number_of_first_objects=number_of_first_objects)

    def with_number_of_first_clusters(self, number_of_first_clusters: int) -> "BuildParams":
        return self._replace(number_of_first_clusters=number_of_first_clusters)

    def with_number_of_second_objects(self, number_of_second_objects: int) -> "BuildParams":
        return self._replace(number_of_second_objects=number_of_second_objects)

    def with_number_of_second_clusters(self, number_of_second_clusters: int) -> "BuildParams":
        return self._replace(number_of_second_clusters=number_of_second_clusters)

    def with_number_of_third_clusters(self, number_of_third_clusters: int) -> "BuildParams":
        return self._replace(number_of_third_clusters=number_of_third_clusters)

    def with_number_of_objects(self, number_of_objects: int) -> "BuildParams":
        return self._replace(number_of_objects=number_of_objects)

    def with_number_of_subvectors(self, number_of_subvectors: int) -> "BuildParams":
        return self._replace(number_of_subvectors=number_of_subvectors)

    def with_optimization_clustering_init_mode(self, mode: ClusteringInitModeInput) -> "BuildParams":
        return self._replace(optimization_clustering_init_mode=normalize_clustering_init_mode(mode))

    def with_rotation_iteration(self, rotation_iteration: int) -> "BuildParams":
        return self._replace(rotation_iteration=rotation_iteration)

    def with_subvector_iteration(self, subvector_iteration: int) -> "BuildParams":
        return self._replace(subvector_iteration=subvector_iteration)

    def with_number_of_matrices(self, number_of_matrices: int) -> "BuildParams":
        return self._replace(number_of_matrices=number_of_matrices)

    def with_rotation(self, rotation: bool) -> "BuildParams":
        return self._replace(rotation=rotation)

    def with_repositioning(self, repositioning: bool) -> "BuildParams":
        return self._replace(repositioning=repositioning)

    def into_raw(self) -> raw.QBGBuildParameters:
        """Copy into the engine's fixed-layout record, init modes as codes."""
        logger.debug("finalizing build parameters %s", self)
        return raw.QBGBuildParameters(
            hierarchical_clustering_init_mode=self.hierarchical_clustering_init_mode.code,
            number_of_first_objects=self.number_of_first_objects,
            number_of_first_clusters=self.number_of_first_clusters,
            number_of_second_objects=self.number_of_second_objects,
            number_of_second_clusters=self.number_of_second_clusters,
            number_of_third_clusters=self.number_of_third_clusters,
            number_of_objects=self.number_of_objects,
            number_of_subvectors=self.number_of_subvectors,
            optimization_clustering_init_mode=self.optimization_clustering_init_mode.code,
            rotation_iteration=self.rotation_iteration,
            subvector_iteration=self.subvector_iteration,
            number_of_matrices=self.number_of_matrices,
            rotation=self.rotation,
            repositioning=self.repositioning,
        )

    @classmethod
    def from_raw(cls, record: raw.QBGBuildParameters) -> "BuildParams":
        fields = raw.as_dict(record)
        for name in ("hierarchical_clustering_init_mode", "optimization_clustering_init_mode"):
            fields[name] = ClusteringInitMode.from_code(fields[name])
        return cls(**fields)
