"""异步结果通道 -- 一次性 future 封装

查询服务与仓储的每次调用都返回一个 ResultChannel：
通道内恰好投递一次 ServiceResult（成功值或错误二选一），
调用方只需 await，不接触底层的 asyncio 任务细节。
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ResultAlreadyDeliveredError


class ServiceResult(BaseModel):
    """异步调用结果信封：result 与 error 二选一"""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    result: Any = Field(default=None, description="成功值，未找到时为 None")
    error: Exception | None = Field(default=None, description="失败原因")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """返回成功值；失败时原样抛出 error"""
        if self.error is not None:
            raise self.error
        return self.result


class ResultChannel:
    """一次性结果通道

    - 只能投递一次，重复投递抛出 ResultAlreadyDeliveredError
    - await 在投递前挂起，投递后每次 await 返回同一个 ServiceResult
    - 本层不做重试与超时
    """

    def __init__(self) -> None:
        self._envelope: ServiceResult | None = None
        self._delivered = asyncio.Event()
        self._runner: asyncio.Task | None = None

    @classmethod
    def resolved(cls, value: Any = None) -> "ResultChannel":
        """构造已投递成功值的通道"""
        channel = cls()
        channel.succeed(value)
        return channel

    @classmethod
    def failed(cls, error: Exception) -> "ResultChannel":
        """构造已投递错误的通道"""
        channel = cls()
        channel.fail(error)
        return channel

    @classmethod
    def from_coroutine(cls, coro: Coroutine[Any, Any, Any]) -> "ResultChannel":
        """在当前事件循环上调度协程，其结果或异常投递到通道

        必须在运行中的事件循环内调用。
        """
        channel = cls()

        async def _run() -> None:
            try:
                value = await coro
            except Exception as e:
                channel.fail(e)
            else:
                channel.succeed(value)

        channel._runner = asyncio.get_running_loop().create_task(_run())
        return channel

    @property
    def done(self) -> bool:
        return self._envelope is not None

    def deliver(self, envelope: ServiceResult) -> None:
        if self._envelope is not None:
            raise ResultAlreadyDeliveredError()
        self._envelope = envelope
        self._delivered.set()

    def succeed(self, value: Any = None) -> None:
        self.deliver(ServiceResult(result=value))

    def fail(self, error: Exception) -> None:
        self.deliver(ServiceResult(error=error))

    async def wait(self) -> ServiceResult:
        """挂起直到结果投递，返回结果信封"""
        await self._delivered.wait()
        assert self._envelope is not None
        return self._envelope

    def __await__(self):
        return self.wait().__await__()
