"""
Tutorials sub-package: one module per narrative document. Each document
loads or simulates its data, calls the library estimators and plots, prints
their default output and narrates the result. Documents are looked up by
name through the registry (:mod:`~statnotes.tutorials._registry`).
"""
from ._registry import (
    TUTORIAL_MODULES,
    Tutorial,
    register,
    list_tutorials,
    get_tutorial,
    run_tutorial,
    run_all,
)

__all__ = [
    "TUTORIAL_MODULES",
    "Tutorial",
    "register",
    "list_tutorials",
    "get_tutorial",
    "run_tutorial",
    "run_all",
]
