"""Application layer - use cases, document loading and presets."""

from .commands import AnalysisOutput, AnalyzePackCommand

__all__ = ["AnalysisOutput", "AnalyzePackCommand"]
