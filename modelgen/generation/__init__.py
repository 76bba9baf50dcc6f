"""
Generation pipeline and artifact writing.
"""

from .pipeline import ArtifactGenerator, generate_artifacts
from .writer import ArtifactWriter

__all__ = [
    "ArtifactGenerator",
    "generate_artifacts",
    "ArtifactWriter",
]
