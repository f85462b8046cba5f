from .merge_workflow import build_merge_pipeline, run_merge

__all__ = ["build_merge_pipeline", "run_merge"]
