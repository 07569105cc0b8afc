"""Schema-validated header/footer configuration factories.

A factory builds the full configuration document for one locale by asking a
key accessor for every localizable field, with a static default for each.
The resolver created by ``create_config_resolver`` then validates the
document against its schema and either returns the typed value or raises
``ConfigValidationError``. It never returns a partially valid object.
"""

from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

from pydantic import ValidationError

from infrastructure.logging import get_module_logger
from modules.site_config.errors import ConfigValidationError
from modules.site_config.schemas import (
    ConfigModel,
    ResolvedFooterConfig,
    ResolvedHeaderConfig,
)

logger = get_module_logger()

ModelT = TypeVar("ModelT", bound=ConfigModel)


class GetKey(Protocol):
    """Locale-scoped key accessor. Never raises; returns the default when absent."""

    def __call__(self, key: str, default_value: Optional[str] = None) -> str: ...


def validate_config(
    model: type[ModelT], document: Dict[str, Any], config_type: str
) -> ModelT:
    """Validate ``document`` against ``model``.

    Raises:
        ConfigValidationError: listing every violation by its camelCase path.
    """
    try:
        return model.model_validate(document)
    except ValidationError as e:
        errors = [
            (".".join(str(part) for part in error["loc"]), error["msg"])
            for error in e.errors()
        ]
        raise ConfigValidationError(config_type, errors) from e


def create_config_resolver(
    model: type[ModelT],
    factory: Callable[[GetKey], Dict[str, Any]],
    config_type: str,
) -> Callable[[GetKey], ModelT]:
    """Combine a document factory with its schema into a fail-closed resolver.

    Args:
        model: Schema the built document must satisfy.
        factory: Builds the document from a key accessor.
        config_type: Name used in error messages ("header", "footer").

    Returns:
        ``resolve(get_key)`` returning the validated configuration.
    """

    def resolve(get_key: GetKey) -> ModelT:
        document = factory(get_key)
        try:
            return validate_config(model, document, config_type)
        except ConfigValidationError as e:
            logger.error(
                "config_validation_failed",
                config_type=config_type,
                errors=e.errors,
            )
            raise

    return resolve


def header_config_factory(get_key: GetKey) -> Dict[str, Any]:
    return {
        "logo": {
            "text": get_key("logo.text", default_value="My App"),
            "href": "/",
            "className": "text-lg font-bold transition-colors",
        },
        "navigation": [
            {
                "label": get_key("navigation.features", default_value="Features"),
                "href": "/features",
                "subItems": [
                    {
                        "label": get_key(
                            "navigation.featuresAnalytics", default_value="Analytics"
                        ),
                        "href": "/features/analytics",
                        "description": get_key(
                            "navigation.featuresAnalyticsDescription",
                            default_value="Powerful analytics and insights",
                        ),
                    },
                    {
                        "label": get_key(
                            "navigation.featuresCollaboration",
                            default_value="Collaboration",
                        ),
                        "href": "/features/collaboration",
                        "description": get_key(
                            "navigation.featuresCollaborationDescription",
                            default_value="Team collaboration tools",
                        ),
                    },
                ],
            },
            {
                "label": get_key("navigation.pricing", default_value="Pricing"),
                "href": "/pricing",
            },
            {
                "label": get_key("navigation.about", default_value="About"),
                "href": "/about",
            },
        ],
        "actions": [
            {
                "label": get_key("actions.signIn", default_value="Sign In"),
                "href": "/auth/signin",
                "variant": "ghost",
                "size": "sm",
            },
            {
                "label": get_key("actions.getStarted", default_value="Get Started"),
                "href": "/auth/signup",
                "variant": "primary",
                "size": "sm",
            },
        ],
        "appearance": {
            "variant": "elevated",
            "background": "default",
            "sticky": True,
            "showBorder": True,
            "height": "default",
            "mobileMenuBreakpoint": "md",
            "navigationAlignment": "right",
            "className": "",
        },
        "mobile": {
            "showLogo": True,
            "showActions": True,
            "menuPosition": "right",
            "overlayBackground": "blur",
        },
        "accessibility": {
            "skipToContentHref": "#main-content",
            "logoAriaLabel": get_key(
                "accessibility.logoAriaLabel", default_value="Go to homepage"
            ),
            "mobileMenuAriaLabel": get_key(
                "accessibility.mobileMenuAriaLabel", default_value="Toggle mobile menu"
            ),
            "navigationAriaLabel": get_key(
                "accessibility.navigationAriaLabel", default_value="Main navigation"
            ),
        },
    }


def footer_config_factory(get_key: GetKey) -> Dict[str, Any]:
    def link(key: str, default: str, href: str) -> Dict[str, str]:
        return {"label": get_key(key, default_value=default), "href": href}

    def social(key: str, default: str, href: str) -> Dict[str, str]:
        return {"platform": get_key(key, default_value=default), "href": href}

    return {
        "contact": {
            "address": get_key(
                "contact.address", default_value="123 Main Street, City, State 12345"
            ),
            "phone": get_key("contact.phone", default_value="+1 (555) 123-4567"),
            "email": get_key("contact.email", default_value="paperkitegames@gmail.com"),
        },
        "socialLinks": [
            social("social.x", "X", "https://x.com/PaperKiteGames"),
            social("social.ig", "IG", "https://www.instagram.com/paperkitegames"),
            social("social.discord", "Discord", "https://discord.gg/eFgfb6vHwG"),
            social("social.youtube", "YouTube", "https://www.youtube.com/@PaperKiteGames"),
        ],
        "legalLinks": [
            link("legal.privacy", "Privacy Policy", "/privacy"),
            link("legal.terms", "Terms of Service", "/terms"),
        ],
        "productLinks": [
            link("product.features", "Features", "/features"),
            link("product.pricing", "Pricing", "/pricing"),
        ],
        "solutionLinks": [],
        "resourceLinks": [],
        "supportLinks": [],
        "companyLinks": [],
        "appearance": {
            "variant": "detailed",
            "background": "dark",
            "showBackToTop": True,
            "showDividers": True,
            "className": "w-screen max-w-none !mx-0 !px-0",
        },
        "copyright": get_key(
            "copyright", default_value="© 2025 My Company. All rights reserved."
        ),
        "accessibility": {
            "footerAriaLabel": get_key(
                "accessibility.footerAriaLabel", default_value="Website footer"
            ),
            "socialLinksAriaLabel": get_key(
                "accessibility.socialLinksAriaLabel", default_value="Social media links"
            ),
            "legalLinksAriaLabel": get_key(
                "accessibility.legalLinksAriaLabel", default_value="Legal information"
            ),
            "productLinksAriaLabel": get_key(
                "accessibility.productLinksAriaLabel", default_value="Product links"
            ),
            "contactInfoAriaLabel": get_key(
                "accessibility.contactInfoAriaLabel",
                default_value="Contact information",
            ),
            "backToTopAriaLabel": get_key(
                "accessibility.backToTopAriaLabel", default_value="Back to top of page"
            ),
            "copyrightAriaLabel": get_key(
                "accessibility.copyrightAriaLabel",
                default_value="Copyright information",
            ),
        },
    }


resolve_header_config = create_config_resolver(
    ResolvedHeaderConfig, header_config_factory, "header"
)

resolve_footer_config = create_config_resolver(
    ResolvedFooterConfig, footer_config_factory, "footer"
)
