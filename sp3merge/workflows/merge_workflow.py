#!filepath: sp3merge/workflows/merge_workflow.py
from __future__ import annotations

from sp3merge.config.app_config import AppConfig
from sp3merge.dataloader.sp3_reader import Sp3Reader
from sp3merge.engines.merge_engine import MergeEngine
from sp3merge.engines.sp3_writer_engine import Sp3WriterEngine
from sp3merge.observability.instrumentation import Instrumentation, NoOpInstrumentation
from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.pipeline import DataPipeline
from sp3merge.steps.merge_step import MergeStep
from sp3merge.steps.read_step import ReadStep
from sp3merge.steps.select_object_step import SelectObjectStep
from sp3merge.steps.write_step import WriteStep
from sp3merge.utils.logger import init_logging, logs
from sp3merge.utils.path import PathManager


def build_merge_pipeline(cfg: AppConfig) -> DataPipeline:
    """
    SP3 Merge Pipeline

    Semantic Order:
        Read          (files → Sp3Document, order preserved)
        → Select      (object id, per-input ObjectEphemeris)
        → Merge       (dedup by epoch, last-source-wins, sort)
        → Write       (22-line header + 3 lines / epoch + EOF)

    Nothing is written before Merge succeeds.
    """
    inst = Instrumentation() if cfg.instrumentation else NoOpInstrumentation()

    steps = [
        ReadStep(reader=Sp3Reader(), inst=inst),
        SelectObjectStep(inst=inst),
        MergeStep(engine=MergeEngine(), inst=inst),
        WriteStep(
            engine=Sp3WriterEngine(header=cfg.header, fmt=cfg.record_format),
            inst=inst,
        ),
    ]

    return DataPipeline(steps=steps, pm=PathManager, inst=inst)


def run_merge(cfg: AppConfig) -> MergeContext:
    """
    按配置执行一次合并，返回最终 context。
    """
    init_logging(
        log_dir=cfg.log.dir,
        level=cfg.log.level,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
    )
    PathManager.set_data_root(cfg.merge.data_dir)

    logs.info(f"[Workflow] data root = {PathManager.data_root()}")

    pipeline = build_merge_pipeline(cfg)
    return pipeline.run(
        input_files=cfg.merge.measurement_files,
        output_file=cfg.merge.output_file_name,
        object_id=cfg.merge.object_id,
    )
