"""View tree model for decoded interface builder documents.

The tree is read-only for rules. Node kinds form a closed enumeration;
which direct color properties a node exposes is a property of its kind,
queried through ``ViewKind.color_properties`` instead of type tests.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

BASE_COLOR_PROPERTIES = ("backgroundColor", "tintColor")


class ViewKind(Enum):
    """Element tags of the view kinds the decoder understands."""

    VIEW = "view"
    LABEL = "label"
    BUTTON = "button"
    SWITCH = "switch"
    TEXT_VIEW = "textView"
    TEXT_FIELD = "textField"
    IMAGE_VIEW = "imageView"
    STACK_VIEW = "stackView"
    SCROLL_VIEW = "scrollView"
    TABLE_VIEW = "tableView"
    TABLE_VIEW_CELL = "tableViewCell"
    TABLE_VIEW_CELL_CONTENT_VIEW = "tableViewCellContentView"
    COLLECTION_VIEW = "collectionView"
    COLLECTION_VIEW_CELL = "collectionViewCell"
    COLLECTION_VIEW_CELL_CONTENT_VIEW = "collectionViewCellContentView"
    SEGMENTED_CONTROL = "segmentedControl"
    SLIDER = "slider"
    STEPPER = "stepper"
    PROGRESS_VIEW = "progressView"
    ACTIVITY_INDICATOR_VIEW = "activityIndicatorView"
    PAGE_CONTROL = "pageControl"
    DATE_PICKER = "datePicker"
    PICKER_VIEW = "pickerView"
    SEARCH_BAR = "searchBar"
    NAVIGATION_BAR = "navigationBar"
    TOOLBAR = "toolbar"
    TAB_BAR = "tabBar"
    MAP_VIEW = "mapView"
    WEB_VIEW = "wkWebView"
    VISUAL_EFFECT_VIEW = "visualEffectView"
    CONTAINER_VIEW = "containerView"

    @classmethod
    def from_tag(cls, tag: str) -> "ViewKind | None":
        """Kind for an XML element tag, or None if the tag is not a view."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def class_name(self) -> str:
        """UIKit class backing this kind."""
        return _CLASS_NAMES.get(self, "UI" + self.value[0].upper() + self.value[1:])

    @property
    def color_properties(self) -> tuple[str, ...]:
        """Direct color properties a node of this kind exposes."""
        return BASE_COLOR_PROPERTIES + _EXTRA_COLOR_PROPERTIES.get(self, ())


_CLASS_NAMES = {
    ViewKind.VIEW: "UIView",
    ViewKind.TEXT_VIEW: "UITextView",
    ViewKind.TEXT_FIELD: "UITextField",
    ViewKind.WEB_VIEW: "WKWebView",
    ViewKind.MAP_VIEW: "MKMapView",
    ViewKind.CONTAINER_VIEW: "UIView",
    ViewKind.TABLE_VIEW_CELL_CONTENT_VIEW: "UITableViewCellContentView",
    ViewKind.COLLECTION_VIEW_CELL_CONTENT_VIEW: "UICollectionViewCellContentView",
}

_EXTRA_COLOR_PROPERTIES: dict[ViewKind, tuple[str, ...]] = {
    ViewKind.LABEL: ("textColor",),
    ViewKind.TEXT_VIEW: ("textColor",),
    ViewKind.SWITCH: ("onTintColor",),
}

COLOR_FIELDS = {
    "backgroundColor": "background_color",
    "tintColor": "tint_color",
    "textColor": "text_color",
    "onTintColor": "on_tint_color",
}


@dataclass(frozen=True)
class Color:
    """A color as written in the document (named, system or components)."""

    key: str
    name: str | None = None
    system_color: str | None = None
    components: dict[str, str] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class UserDefinedRuntimeAttribute:
    """A key path / value pair attached to a view."""

    key_path: str
    value: Any = None
    type: str | None = None


@dataclass(frozen=True)
class View:
    """A node of the view hierarchy."""

    kind: ViewKind
    id: str | None = None
    custom_class: str | None = None
    user_label: str | None = None
    background_color: Color | None = None
    tint_color: Color | None = None
    text_color: Color | None = None
    on_tint_color: Color | None = None
    user_defined_runtime_attributes: tuple[UserDefinedRuntimeAttribute, ...] = ()
    subviews: tuple["View", ...] = ()

    @property
    def display_name(self) -> str:
        """Name used in violation messages."""
        name = self.custom_class or self.kind.class_name
        if self.user_label:
            return f"{name} ({self.user_label})"
        return name

    def hard_coded_colors(self) -> list[str]:
        """Populated direct color properties this view's kind exposes."""
        return [
            prop
            for prop in self.kind.color_properties
            if getattr(self, COLOR_FIELDS[prop]) is not None
        ]


@dataclass(frozen=True)
class ViewController:
    """The controller object of a storyboard scene."""

    element: str
    id: str | None = None
    custom_class: str | None = None
    root_view: View | None = None


@dataclass(frozen=True)
class Scene:
    """A storyboard scene."""

    id: str | None = None
    view_controller: ViewController | None = None


@dataclass(frozen=True)
class XibDocument:
    """Decoded .xib file: a flat list of top-level views."""

    path: Path
    views: tuple[View, ...] | None = None

    @property
    def path_string(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class StoryboardDocument:
    """Decoded .storyboard file: a list of scenes."""

    path: Path
    scenes: tuple[Scene, ...] | None = None

    @property
    def path_string(self) -> str:
        return str(self.path)


InterfaceBuilderDocument = XibDocument | StoryboardDocument
