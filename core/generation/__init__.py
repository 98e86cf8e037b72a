# Path: core/generation/__init__.py
# Purpose: Package initializer for combinatorial generation.
# Layer: core/generation.
# Details: Exposes the enumerator, compositing pipeline, output writer, and group runner.

from .enumerator import CombinationEnumerator
from .compositor import Compositor, PillowCompositor
from .pipeline import CompositingPipeline, build_caption, build_layers
from .writer import OutputWriter
from .runner import DatasetGenerator

__all__ = [
    "CombinationEnumerator",
    "CompositingPipeline",
    "Compositor",
    "DatasetGenerator",
    "OutputWriter",
    "PillowCompositor",
    "build_caption",
    "build_layers",
]
