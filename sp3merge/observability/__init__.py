from .instrumentation import Instrumentation, NoOpInstrumentation
from .reporter import EphemerisReporter
from .timeline_reporter import TimelineReporter
from .timer import Timer

__all__ = [
    "Instrumentation",
    "NoOpInstrumentation",
    "EphemerisReporter",
    "TimelineReporter",
    "Timer",
]
