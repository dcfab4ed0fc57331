"""Element processors for the tree builder."""

from brickify.builder.processors.alert import AlertProcessor
from brickify.builder.processors.base import Processor, ProcessorRegistry
from brickify.builder.processors.form import ButtonProcessor, FormProcessor
from brickify.builder.processors.inline import StandaloneInlineProcessor
from brickify.builder.processors.link import LinkProcessor
from brickify.builder.processors.lists import ListProcessor
from brickify.builder.processors.media import (
    AudioProcessor,
    ImageProcessor,
    SvgProcessor,
    VideoProcessor,
)
from brickify.builder.processors.misc import GenericProcessor, MiscProcessor, ScriptProcessor
from brickify.builder.processors.navigation import NavProcessor
from brickify.builder.processors.structure import DivProcessor, StructureProcessor
from brickify.builder.processors.table import TableProcessor
from brickify.builder.processors.text import HeadingProcessor, TextProcessor

__all__ = [
    "Processor",
    "ProcessorRegistry",
    "StandaloneInlineProcessor",
    "AlertProcessor",
    "NavProcessor",
    "StructureProcessor",
    "DivProcessor",
    "HeadingProcessor",
    "TextProcessor",
    "LinkProcessor",
    "ImageProcessor",
    "ButtonProcessor",
    "SvgProcessor",
    "FormProcessor",
    "TableProcessor",
    "ListProcessor",
    "AudioProcessor",
    "VideoProcessor",
    "ScriptProcessor",
    "MiscProcessor",
    "GenericProcessor",
    "create_default_processors",
]


def create_default_processors() -> ProcessorRegistry:
    """Create a ProcessorRegistry with every built-in processor, in dispatch order."""
    registry = ProcessorRegistry()

    # Context-sensitive routing first
    registry.register(StandaloneInlineProcessor())
    registry.register(AlertProcessor())
    registry.register(NavProcessor())

    # Layout
    registry.register(StructureProcessor())
    registry.register(DivProcessor())

    # Text
    registry.register(HeadingProcessor())
    registry.register(TextProcessor())
    registry.register(LinkProcessor())

    # Media and controls
    registry.register(ImageProcessor())
    registry.register(ButtonProcessor())
    registry.register(SvgProcessor())
    registry.register(FormProcessor())
    registry.register(TableProcessor())
    registry.register(ListProcessor())
    registry.register(AudioProcessor())
    registry.register(VideoProcessor())

    # Everything else
    registry.register(ScriptProcessor())
    registry.register(MiscProcessor())
    registry.set_fallback(GenericProcessor())

    return registry
