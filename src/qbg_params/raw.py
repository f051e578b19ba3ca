"""
Fixed-layout records handed to the QBG engine.

Field order and widths mirror ``QBGConstructionParameters`` and
``QBGBuildParameters`` in the engine's C header. Reordering a field here is
silent memory corruption on the engine side, not an error.
"""

import ctypes

SIZE_T_MAX: int = 2 ** (8 * ctypes.sizeof(ctypes.c_size_t)) - 1


class QBGConstructionParameters(ctypes.Structure):
    _fields_ = [
        ("extended_dimension", ctypes.c_size_t),
        ("dimension", ctypes.c_size_t),
        ("number_of_subvectors", ctypes.c_size_t),
        ("number_of_blobs", ctypes.c_size_t),
        ("internal_data_type", ctypes.c_int32),
        ("data_type", ctypes.c_int32),
        ("distance_type", ctypes.c_int32),
    ]


class QBGBuildParameters(ctypes.Structure):
    _fields_ = [
        # hierarchical kmeans
        ("hierarchical_clustering_init_mode", ctypes.c_int32),
        ("number_of_first_objects", ctypes.c_size_t),
        ("number_of_first_clusters", ctypes.c_size_t),
        ("number_of_second_objects", ctypes.c_size_t),
        ("number_of_second_clusters", ctypes.c_size_t),
        ("number_of_third_clusters", ctypes.c_size_t),
        # optimization
        ("number_of_objects", ctypes.c_size_t),
        ("number_of_subvectors", ctypes.c_size_t),
        ("optimization_clustering_init_mode", ctypes.c_int32),
        ("rotation_iteration", ctypes.c_size_t),
        ("subvector_iteration", ctypes.c_size_t),
        ("number_of_matrices", ctypes.c_size_t),
        ("rotation", ctypes.c_bool),
        ("repositioning", ctypes.c_bool),
    ]


def field_names(record_type) -> list:
    """Field names of a raw record type, in engine order."""
    return [name for name, _ in record_type._fields_]


def as_dict(record: ctypes.Structure) -> dict:
    """Field values of a raw record keyed by name, in engine order."""
    return {name: getattr(record, name) for name in field_names(type(record))}
