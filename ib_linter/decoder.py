"""Decodes .xib and .storyboard XML into the view tree model.

Only what rules consume is extracted: view kinds, identifiers, custom
classes, direct colors, user defined runtime attributes and subviews.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from lxml import etree

from .documents import (
    COLOR_FIELDS,
    Color,
    InterfaceBuilderDocument,
    Scene,
    StoryboardDocument,
    UserDefinedRuntimeAttribute,
    View,
    ViewController,
    ViewKind,
    XibDocument,
)
from .errors import DocumentDecodeError
from .linter_logging import get_logger

XIB_SUFFIX = ".xib"
STORYBOARD_SUFFIX = ".storyboard"
SUPPORTED_SUFFIXES = (XIB_SUFFIX, STORYBOARD_SUFFIX)

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def decode_file(path: Path) -> InterfaceBuilderDocument:
    """Decode a document, choosing the format from the file suffix.

    Raises:
        DocumentDecodeError: If the file cannot be read, is not one of the
            supported formats, or is not well-formed.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DocumentDecodeError(str(path), f"unsupported file type '{suffix}'")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentDecodeError(str(path), str(e)) from e

    if suffix == XIB_SUFFIX:
        return decode_xib(data, path)
    return decode_storyboard(data, path)


def decode_files(
    paths: Iterable[Path], logger: logging.Logger | None = None
) -> list[InterfaceBuilderDocument]:
    """Decode every path, skipping files that fail to decode.

    Decode failures are logged at ERROR and never abort the batch.
    """
    logger = logger or get_logger()
    documents: list[InterfaceBuilderDocument] = []
    for path in paths:
        try:
            documents.append(decode_file(path))
        except DocumentDecodeError as e:
            logger.error(e.message, extra={"file_path": str(path)})
    return documents


def decode_xib(data: bytes, path: Path) -> XibDocument:
    """Decode .xib content: every view element directly under <objects>."""
    root = _parse(data, path)
    objects = root.xpath("objects")
    if not objects:
        return XibDocument(path=path, views=None)

    try:
        views = tuple(
            _decode_view(element)
            for element in objects[0].xpath("*")
            if ViewKind.from_tag(element.tag) is not None
        )
    except ValueError as e:
        raise DocumentDecodeError(str(path), str(e)) from e
    return XibDocument(path=path, views=views)


def decode_storyboard(data: bytes, path: Path) -> StoryboardDocument:
    """Decode .storyboard content into scenes and their root views."""
    root = _parse(data, path)
    scenes_elements = root.xpath("scenes")
    if not scenes_elements:
        return StoryboardDocument(path=path, scenes=None)

    try:
        scenes = tuple(
            Scene(
                id=scene.get("sceneID"),
                view_controller=_decode_view_controller(scene),
            )
            for scene in scenes_elements[0].xpath("scene")
        )
    except ValueError as e:
        raise DocumentDecodeError(str(path), str(e)) from e
    return StoryboardDocument(path=path, scenes=scenes)


def _parse(data: bytes, path: Path) -> Any:
    try:
        root = etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        raise DocumentDecodeError(str(path), str(e)) from e
    if root.tag != "document":
        raise DocumentDecodeError(str(path), f"unexpected root element <{root.tag}>")
    return root


def _decode_view_controller(scene: Any) -> ViewController | None:
    for element in scene.xpath("objects/*"):
        tag = element.tag
        if tag.endswith("Controller") or tag == "viewControllerPlaceholder":
            root_view = None
            for child in element.xpath("*[@key='view']"):
                if ViewKind.from_tag(child.tag) is not None:
                    root_view = _decode_view(child)
                    break
            return ViewController(
                element=tag,
                id=element.get("id"),
                custom_class=element.get("customClass"),
                root_view=root_view,
            )
    return None


def _decode_view(element: Any) -> View:
    kind = ViewKind(element.tag)
    colors: dict[str, Color] = {}
    attributes: list[UserDefinedRuntimeAttribute] = []
    subviews: list[View] = []

    for child in element.xpath("*"):
        if child.tag == "color" and child.get("key") in COLOR_FIELDS:
            colors[COLOR_FIELDS[child.get("key")]] = _decode_color(child)
        elif child.tag == "userDefinedRuntimeAttributes":
            attributes.extend(
                _decode_attribute(attribute)
                for attribute in child.xpath("userDefinedRuntimeAttribute")
            )
        elif child.tag == "subviews":
            subviews.extend(
                _decode_view(subview)
                for subview in child.xpath("*")
                if ViewKind.from_tag(subview.tag) is not None
            )
        elif (
            child.get("key") == "contentView"
            and ViewKind.from_tag(child.tag) is not None
        ):
            subviews.append(_decode_view(child))

    return View(
        kind=kind,
        id=element.get("id"),
        custom_class=element.get("customClass"),
        user_label=element.get("userLabel"),
        user_defined_runtime_attributes=tuple(attributes),
        subviews=tuple(subviews),
        **colors,
    )


def _decode_color(element: Any) -> Color:
    components = {
        name: value
        for name, value in element.attrib.items()
        if name not in ("key", "name", "systemColor")
    }
    return Color(
        key=element.get("key", ""),
        name=element.get("name"),
        system_color=element.get("systemColor"),
        components=components,
    )


def _decode_attribute(element: Any) -> UserDefinedRuntimeAttribute:
    attr_type = element.get("type")
    return UserDefinedRuntimeAttribute(
        key_path=element.get("keyPath", ""),
        value=_decode_attribute_value(element, attr_type),
        type=attr_type,
    )


def _decode_attribute_value(element: Any, attr_type: str | None) -> Any:
    raw = element.get("value")

    if attr_type == "boolean":
        return None if raw is None else raw == "YES"

    if attr_type == "number":
        for child in element.xpath("*[@key='value']"):
            number = child.get("value")
            if number is None:
                return None
            return int(number) if child.tag == "integer" else float(number)
        return None if raw is None else float(raw)

    if attr_type == "color":
        colors = element.xpath("color[@key='value']")
        return _decode_color(colors[0]) if colors else None

    if raw is not None:
        return raw

    strings = element.xpath("string[@key='value']")
    if strings:
        return strings[0].text or ""
    return None
