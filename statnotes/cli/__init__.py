"""
Command line interface of statnotes: list the tutorials and render them to
Markdown (:mod:`~statnotes.cli.documents`).
"""
from .documents import cli

__all__ = ["cli"]
