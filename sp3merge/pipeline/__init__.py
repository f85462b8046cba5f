from .context import MergeContext
from .pipeline import DataPipeline
from .step import PipelineStep

__all__ = ["MergeContext", "DataPipeline", "PipelineStep"]
