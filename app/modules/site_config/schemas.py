"""Validation schemas for resolved header/footer configuration.

All models are frozen Pydantic models. Attributes are snake_case in Python
and camelCase on the wire (``socialLinks``, ``logoAriaLabel``), matching the
documents produced by the config factories and served by the distribution
endpoint.

Accessibility blocks are strict: unknown keys are rejected and every
required label must be a non-empty string, because a missing landmark label
is a compliance defect rather than a rendering preference.
"""

from typing import Annotated, Any, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

Component = Literal["header", "footer"]
COMPONENTS: tuple[str, ...] = ("header", "footer")

ButtonVariant = Literal["primary", "secondary", "outline", "ghost"]
ButtonSize = Literal["sm", "md", "lg"]
Alignment = Literal["left", "center", "right"]


class ConfigModel(BaseModel):
    """Base for configuration value objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_document(self) -> Dict[str, Any]:
        """Dump back to the camelCase document this model was validated from."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class SubNavigationItem(ConfigModel):
    label: NonEmptyStr
    href: NonEmptyStr
    description: Optional[str] = None
    external: bool = False


class NavigationItem(ConfigModel):
    label: NonEmptyStr
    href: NonEmptyStr
    external: bool = False
    sub_items: Optional[List[SubNavigationItem]] = None


class ActionButton(ConfigModel):
    """Call-to-action button.

    ``on_click`` is only meaningful in-process and is never serialized.
    At least one of ``href``/``on_click`` is expected but not enforced.
    """

    label: NonEmptyStr
    href: Optional[str] = None
    on_click: Optional[Callable[[], Any]] = Field(default=None, exclude=True)
    variant: ButtonVariant = "primary"
    size: ButtonSize = "md"
    external: bool = False
    disabled: bool = False


class LogoConfig(ConfigModel):
    text: NonEmptyStr
    href: NonEmptyStr
    class_name: str = ""


class HeaderAppearanceConfig(ConfigModel):
    variant: Literal["default", "transparent", "solid", "elevated", "minimal"] = "default"
    background: Literal["default", "subtle", "dark", "glass", "gradient"] = "default"
    sticky: bool = True
    show_border: bool = True
    height: Literal["compact", "default", "comfortable", "spacious"] = "default"
    mobile_menu_breakpoint: Literal["sm", "md", "lg", "xl"] = "md"
    navigation_alignment: Alignment = "right"
    class_name: str = ""


class MobileConfig(ConfigModel):
    show_logo: bool
    show_actions: bool
    menu_position: Alignment
    overlay_background: Literal["blur", "solid", "dark"]


class HeaderAccessibilityConfig(ConfigModel):
    model_config = ConfigDict(extra="forbid")

    skip_to_content_href: NonEmptyStr
    logo_aria_label: NonEmptyStr
    mobile_menu_aria_label: NonEmptyStr
    navigation_aria_label: NonEmptyStr
    main_landmark_label: Optional[NonEmptyStr] = None
    search_form_label: Optional[str] = None
    language_switcher_label: Optional[str] = None


class ResolvedHeaderConfig(ConfigModel):
    logo: LogoConfig
    navigation: List[NavigationItem]
    actions: List[ActionButton]
    appearance: HeaderAppearanceConfig
    mobile: MobileConfig
    accessibility: HeaderAccessibilityConfig


class LinkItem(ConfigModel):
    label: NonEmptyStr
    href: NonEmptyStr


class SocialLinkItem(ConfigModel):
    platform: NonEmptyStr
    href: NonEmptyStr


class ContactEntry(ConfigModel):
    label: NonEmptyStr
    value: NonEmptyStr
    href: Optional[str] = None


class ContactInfo(ConfigModel):
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    extra: List[ContactEntry] = Field(default_factory=list)


class FooterAppearanceConfig(ConfigModel):
    variant: Literal["minimal", "default", "detailed", "enterprise"] = "default"
    background: Literal["default", "subtle", "dark", "gradient"] = "default"
    show_back_to_top: bool = True
    show_dividers: bool = True
    class_name: str = ""


class FooterAccessibilityConfig(ConfigModel):
    model_config = ConfigDict(extra="forbid")

    footer_aria_label: NonEmptyStr
    social_links_aria_label: NonEmptyStr
    legal_links_aria_label: NonEmptyStr
    product_links_aria_label: NonEmptyStr
    contact_info_aria_label: NonEmptyStr
    back_to_top_aria_label: Optional[str] = None
    copyright_aria_label: Optional[str] = None


class ResolvedFooterConfig(ConfigModel):
    contact: ContactInfo
    social_links: List[SocialLinkItem]
    legal_links: List[LinkItem]
    product_links: List[LinkItem]
    solution_links: List[LinkItem]
    resource_links: List[LinkItem]
    support_links: List[LinkItem]
    company_links: List[LinkItem]
    appearance: FooterAppearanceConfig
    copyright: NonEmptyStr
    accessibility: FooterAccessibilityConfig


CONFIG_MODELS: Dict[str, type[ConfigModel]] = {
    "header": ResolvedHeaderConfig,
    "footer": ResolvedFooterConfig,
}


class ConfigUpdateRequest(BaseModel):
    """Body of a snapshot write: ``{component, config, expectedVersion?}``."""

    model_config = ConfigDict(populate_by_name=True)

    component: Component
    config: Dict[str, Any]
    expected_version: Optional[str] = Field(default=None, alias="expectedVersion")
