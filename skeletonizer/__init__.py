"""
Skeletonizer - turns a markup fragment into a loading-skeleton layout.

Module Structure:
================
- skeleton/: the analysis pipeline (sandbox, classifier, quantizer,
  rows, layout plan, code emitter, preview renderer)
- services/: pipeline composition for callers
- monitoring/: structured logging and run metrics
- routers/, schemas/: HTTP API
- cli.py: command-line entry point
"""

__version__ = "0.1.0"
