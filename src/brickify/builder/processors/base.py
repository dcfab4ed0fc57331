"""Processor protocol and the ordered registry that dispatches to processors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from bs4 import Tag

from brickify.builder.model import ProcessorResult

if TYPE_CHECKING:
    from brickify.builder.context import BuildContext

log = logging.getLogger(__name__)


class Processor(Protocol):
    """Turns one DOM element into builder nodes."""

    def can_handle(self, element: Tag, ctx: BuildContext) -> bool: ...

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult: ...


class ProcessorRegistry:
    """Processors consulted in registration order; the first match wins."""

    def __init__(self) -> None:
        self._processors: list[Processor] = []
        self._fallback: Processor | None = None

    def __len__(self) -> int:
        return len(self._processors)

    def register(self, processor: Processor) -> None:
        self._processors.append(processor)

    def set_fallback(self, processor: Processor) -> None:
        """Set the processor used when nothing else claims an element."""
        self._fallback = processor

    def resolve(self, element: Tag, ctx: BuildContext) -> Processor:
        for processor in self._processors:
            if processor.can_handle(element, ctx):
                log.debug("<%s> -> %s", element.name, type(processor).__name__)
                return processor
        if self._fallback is None:
            raise LookupError(f"No processor for <{element.name}>")
        log.debug("<%s> -> fallback %s", element.name, type(self._fallback).__name__)
        return self._fallback

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        return self.resolve(element, ctx).process(element, ctx)
