"""Global style class registry: one deduplicated class per CSS class name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping

from brickify.mappers.registry import MapperRegistry, append_custom_css
from brickify.mappers.values import class_selector


@dataclass
class GlobalStyleClass:
    """A named bundle of resolved settings shared by every element using it.

    Pseudo-state variants live beside the base settings as
    ``"<key>:<state>"`` entries, e.g. ``"_typography:hover"``.
    """

    id: str
    name: str
    settings: dict[str, Any] = field(default_factory=dict)

    def pseudo_settings(self, state: str) -> dict[str, Any]:
        """The settings stored for *state*, keyed without the suffix."""
        suffix = f":{state}"
        return {
            key[: -len(suffix)]: value
            for key, value in self.settings.items()
            if key.endswith(suffix)
        }

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "settings": self.settings}


def merge_settings(target: dict[str, Any], incoming: Mapping[str, Any]) -> None:
    """Layer *incoming* over *target*.

    ``_typography`` is merged key by key (nested dicts too), other dict
    values shallowly, and ``_cssCustom`` text is appended.
    """
    for key, value in incoming.items():
        if key == "_cssCustom":
            append_custom_css(target, value)
        elif key == "_typography" and isinstance(target.get(key), dict) and isinstance(value, dict):
            typography = target[key]
            for sub, sub_value in value.items():
                if isinstance(typography.get(sub), dict) and isinstance(sub_value, dict):
                    typography[sub] = {**typography[sub], **sub_value}
                else:
                    typography[sub] = sub_value
        elif isinstance(target.get(key), dict) and isinstance(value, dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


class GlobalClassRegistry:
    """Creates, finds and fills global classes for one conversion run."""

    def __init__(self, mappers: MapperRegistry, id_factory: Callable[[], str]) -> None:
        self._mappers = mappers
        self._ids = id_factory
        self._by_id: dict[str, GlobalStyleClass] = {}
        self._by_name: dict[str, GlobalStyleClass] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[GlobalStyleClass]:
        return iter(self._by_id.values())

    def get_or_create(self, name: str) -> GlobalStyleClass:
        cls = self._by_name.get(name)
        if cls is None:
            cls = GlobalStyleClass(id=self._ids(), name=name)
            self._by_id[cls.id] = cls
            self._by_name[name] = cls
        return cls

    def get(self, class_id: str) -> GlobalStyleClass | None:
        return self._by_id.get(class_id)

    def find(self, name: str) -> GlobalStyleClass | None:
        return self._by_name.get(name)

    def first(self) -> GlobalStyleClass | None:
        return next(iter(self._by_id.values()), None)

    def merge(
        self,
        cls: GlobalStyleClass,
        declarations: Mapping[str, str],
        *,
        selector: str | None = None,
        variables: Mapping[str, str] | None = None,
    ) -> GlobalStyleClass:
        """Map *declarations* onto the class settings in place."""
        if declarations:
            self._mappers.apply(
                declarations,
                cls.settings,
                selector=selector or class_selector(cls.name),
                variables=variables,
            )
        return cls

    def merge_pseudo(
        self,
        cls: GlobalStyleClass,
        state: str,
        declarations: Mapping[str, str],
        *,
        variables: Mapping[str, str] | None = None,
    ) -> GlobalStyleClass:
        """Map *declarations* for one pseudo state, e.g. ``hover``."""
        scratch = self._mappers.apply(
            declarations,
            {},
            selector=f"{class_selector(cls.name)}:{state}",
            variables=variables,
        )
        store_pseudo(cls.settings, state, scratch)
        return cls

    def append_custom_css(self, cls: GlobalStyleClass, text: str, *, prepend: bool = False) -> None:
        append_custom_css(cls.settings, text, prepend=prepend)

    def to_list(self) -> list[dict[str, Any]]:
        return [cls.to_dict() for cls in self]


def store_pseudo(settings: dict[str, Any], state: str, mapped: Mapping[str, Any]) -> None:
    """Copy mapped settings in as ``"<key>:<state>"``; custom CSS is appended."""
    for key, value in mapped.items():
        if key == "_cssCustom":
            append_custom_css(settings, value)
        else:
            settings[f"{key}:{state}"] = value
