"""
Error Types - Failures raised inside the skeleton pipeline.

The analyzer catches every one of these at its boundary and turns it
into an AnalysisResult with `error` set, so callers never see them
unless they drive the sandbox or classifier directly.
"""


class SkeletonError(Exception):
    """Base class for skeleton pipeline errors."""


class AcquisitionError(SkeletonError):
    """The render surface could not be created or its document reached."""


class TraversalError(SkeletonError):
    """The layout snapshot could not be read or classified."""
