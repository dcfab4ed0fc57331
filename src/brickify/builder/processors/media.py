"""Images, inline SVG, audio and video."""

from __future__ import annotations

from urllib.parse import urlparse

from bs4 import Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, outer_html
from brickify.builder.model import Leaf, ProcessorResult


def filename_from_url(url: str, default: str) -> str:
    """Last path segment of *url*, or *default* when there is none."""
    path = urlparse(url).path if url else ""
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return name or default


def _pixels(value: str) -> str:
    return f"{value}px" if value.isdigit() else value


def _source_url(element: Tag) -> str:
    src = attr(element, "src")
    if src:
        return src
    source = element.find("source")
    return attr(source, "src") if isinstance(source, Tag) else ""


class ImageProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "img"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        src = attr(element, "src")
        settings = {
            "src": src,
            "alt": attr(element, "alt"),
            "image": {
                "url": src,
                "external": True,
                "filename": filename_from_url(src, "image.jpg"),
            },
        }
        return Leaf(ctx.new_node("image", settings, label=ctx.label_for(element)))


class SvgProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "svg"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings = {"source": "code", "code": outer_html(element)}
        return Leaf(ctx.new_node("svg", settings, label=ctx.label_for(element)))


class AudioProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "audio"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings = {
            "source": "external",
            "external": _source_url(element),
            "loop": element.has_attr("loop"),
            "autoplay": element.has_attr("autoplay"),
        }
        return Leaf(ctx.new_node("audio", settings, label=ctx.label_for(element)))


class VideoProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "video"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings = {
            "videoType": "file",
            "youTubeId": "",
            "youtubeControls": True,
            "vimeoByline": True,
            "vimeoTitle": True,
            "vimeoPortrait": True,
            "fileUrl": _source_url(element),
            "fileControls": element.has_attr("controls"),
            "fileAutoplay": element.has_attr("autoplay"),
            "fileLoop": element.has_attr("loop"),
            "fileMute": element.has_attr("muted"),
            "fileInline": element.has_attr("playsinline"),
            "filePreload": attr(element, "preload") or "auto",
        }
        poster = attr(element, "poster")
        if poster:
            settings["videoPoster"] = {
                "url": poster,
                "external": True,
                "filename": filename_from_url(poster, "poster.jpg"),
            }
        dimensions = [
            f"{name}: {_pixels(attr(element, name))}"
            for name in ("width", "height")
            if attr(element, name)
        ]
        if dimensions:
            settings["style"] = "; ".join(dimensions)
        return Leaf(ctx.new_node("video", settings, label=ctx.label_for(element)))
