"""
Pytest configuration and shared fixtures
"""

import pytest
import sys
import os

import numpy as np

# Add src to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from qbg_params.models.build import BuildParams
from qbg_params.models.construct import ConstructParams


@pytest.fixture
def float_params():
    """Construction parameters for 100-dimensional float32 vectors"""
    return ConstructParams.create(100, np.float32)


@pytest.fixture
def uint8_params():
    """Construction parameters for 16-dimensional uint8 vectors"""
    return ConstructParams.create(16, np.uint8)


@pytest.fixture
def default_build_params():
    return BuildParams()


@pytest.fixture
def sample_index_config():
    """Human-facing index settings as they would arrive from a config file"""
    return {
        "dimension": 300,
        "element_type": "float16",
        "extended_dimension": 320,
        "number_of_subvectors": 10,
        "number_of_blobs": 50,
        "build": {
            "hierarchical_clustering_init_mode": "kmeans++",
            "optimization_clustering_init_mode": "random_fixed_seed",
            "number_of_first_clusters": 10,
            "number_of_second_clusters": 100,
            "number_of_third_clusters": 1000,
            "rotation_iteration": 500,
        },
    }
