"""Configuration models for .iblinter.yml."""

from typing import Any

from pydantic import BaseModel, Field, validator

CONFIG_FILENAME = ".iblinter.yml"

DEFAULT_REPORTER = "xcode"


class _FrozenModel(BaseModel):
    """Immutable configuration record that ignores unknown keys."""

    class Config:
        frozen = True
        extra = "ignore"
        populate_by_name = True


class ColorThemeConfig(_FrozenModel):
    """Theme file cross-check settings."""

    path: str
    enforce: bool = Field(default=False, alias="enforce_component_theming")

    @validator("enforce", pre=True)
    def null_enforce(cls, value: Any) -> Any:
        return False if value is None else value


class LocalizationConfig(_FrozenModel):
    """Strings file cross-check settings.

    ``report_all_keys`` reports every offending ``locKey*`` attribute of a
    view instead of stopping at the first one.
    """

    path: str
    report_all_keys: bool = False

    @validator("report_all_keys", pre=True)
    def null_report_all(cls, value: Any) -> Any:
        return False if value is None else value


class CustomModuleConfig(_FrozenModel):
    """Custom classes under ``included`` paths must declare ``module``."""

    module: str
    included: list[str] = Field(default_factory=list)

    @validator("included", pre=True)
    def null_included(cls, value: Any) -> Any:
        return [] if value is None else value


class UseBaseClassConfig(_FrozenModel):
    """Elements of ``element_class`` must use one of ``base_classes``."""

    element_class: str
    base_classes: list[str] = Field(default_factory=list)

    @validator("base_classes", pre=True)
    def null_base_classes(cls, value: Any) -> Any:
        return [] if value is None else value


class ViewAsDeviceConfig(_FrozenModel):
    """Device every document must be previewed as."""

    device_id: str


class UseTraitCollectionsConfig(_FrozenModel):
    """Whether documents must use trait variations."""

    enabled: bool = True


class LintConfig(_FrozenModel):
    """Root lint configuration.

    Constructed once per run, immutable afterwards and shared by every
    rule through its Context.
    """

    disabled_rules: list[str] = Field(default_factory=list)
    enabled_rules: list[str] = Field(default_factory=list)
    excluded: list[str] = Field(default_factory=list)
    included: list[str] = Field(default_factory=list)
    custom_module_rule: list[CustomModuleConfig] = Field(default_factory=list)
    use_base_class_rule: list[UseBaseClassConfig] = Field(default_factory=list)
    view_as_device_rule: ViewAsDeviceConfig | None = None
    use_trait_collections_rule: UseTraitCollectionsConfig | None = None
    color_theme_rule: ColorThemeConfig | None = None
    localization_rule: LocalizationConfig | None = None
    reporter: str = DEFAULT_REPORTER
    disable_while_building_for_ib: bool = True
    ignore_cache: bool = False

    @validator(
        "disabled_rules",
        "enabled_rules",
        "excluded",
        "included",
        "custom_module_rule",
        "use_base_class_rule",
        pre=True,
    )
    def null_list_is_empty(cls, value: Any) -> Any:
        """Tolerate ``key:`` with no value for list settings."""
        return [] if value is None else value

    @validator("reporter", pre=True)
    def null_reporter(cls, value: Any) -> Any:
        return DEFAULT_REPORTER if value is None else value

    @validator("disable_while_building_for_ib", pre=True)
    def null_disable_while_building(cls, value: Any) -> Any:
        return True if value is None else value

    @validator("ignore_cache", pre=True)
    def null_ignore_cache(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def default(cls) -> "LintConfig":
        """Built-in configuration used when no config file exists."""
        return cls()

    def enabled_rule_ids(
        self, default_rules: list[str], all_rules: list[str]
    ) -> list[str]:
        """Resolve which rule identifiers run.

        Default rules plus ``enabled_rules`` minus ``disabled_rules``,
        restricted to known identifiers and kept in ``all_rules`` order.

        Args:
            default_rules: Identifiers enabled without configuration.
            all_rules: Every known identifier, in registry order.

        Returns:
            Unique identifiers of the rules to instantiate.
        """
        wanted = set(default_rules) | set(self.enabled_rules)
        wanted -= set(self.disabled_rules)
        return [rule_id for rule_id in all_rules if rule_id in wanted]

    def unknown_rule_ids(self, all_rules: list[str]) -> list[str]:
        """Identifiers named in enabled/disabled lists that no rule has."""
        known = set(all_rules)
        seen: list[str] = []
        for rule_id in [*self.enabled_rules, *self.disabled_rules]:
            if rule_id not in known and rule_id not in seen:
                seen.append(rule_id)
        return seen
