#!filepath: sp3merge/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseEngine(ABC):
    """
    Engine 抽象基类（Atomic Engine Layer）：

    - 不打开 / 关闭任何文件（sink 由 Step 注入）
    - 专注“输入 → 输出”的纯逻辑
    - 可被 pipeline / CLI / 测试直接复用
    """

    @property
    def engine_name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError
