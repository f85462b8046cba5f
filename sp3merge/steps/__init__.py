from .read_step import ReadStep
from .select_object_step import SelectObjectStep
from .merge_step import MergeStep
from .write_step import WriteStep

__all__ = ["ReadStep", "SelectObjectStep", "MergeStep", "WriteStep"]
