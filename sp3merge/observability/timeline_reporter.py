#!filepath: sp3merge/observability/timeline_reporter.py
from typing import Dict

from sp3merge.utils.logger import logs


class TimelineReporter:
    """
    Pipeline Timeline 报告：
    - leaf timer → 耗时秒数
    """

    def __init__(self, timeline: Dict[str, float], label: str):
        self.timeline = timeline
        self.label = label

    @property
    def total(self) -> float:
        return sum(self.timeline.values())

    def print(self):
        logs.info(f"[Timeline] ===== Pipeline timeline for {self.label} =====")

        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")

        logs.info(f"[Timeline] Total{'':<27} {self.total:>8.3f}s")
        logs.info("[Timeline] ===========================================")
