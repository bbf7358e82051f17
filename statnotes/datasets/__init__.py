"""
Datasets sub-package: the bundled sample files (:mod:`~statnotes.datasets.load`)
and the seeded simulators (:mod:`~statnotes.datasets.simulate`) used by the
tutorial documents.
"""
from .load import (
    get_data_path,
    list_datasets,
    read_data,
    load_mtcars,
    load_hair_eye,
    load_iris,
)
from .simulate import (
    simulate_salaries,
    simulate_growth,
    simulate_admissions,
    simulate_customers,
    simulate_blobs,
    simulate_survey,
    simulate_air_quality,
    simulate_housing,
)

__all__ = [
    "get_data_path",
    "list_datasets",
    "read_data",
    "load_mtcars",
    "load_hair_eye",
    "load_iris",
    "simulate_salaries",
    "simulate_growth",
    "simulate_admissions",
    "simulate_customers",
    "simulate_blobs",
    "simulate_survey",
    "simulate_air_quality",
    "simulate_housing",
]
