from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

#: The numeric level used for trace records. Registered as ``TRACE`` on package import.
TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Wraps a standard library logger with an additional, noisier, ``trace`` level.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.log(TRACE, message, *args, **kws)
