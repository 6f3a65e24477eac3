"""Help center: registries, resolution and rendering of help pages."""

from typing import Optional

import httpx

from src.lib.config import HelpSettings, get_settings
from src.services.help.chrome import DEFAULT_HEADER, HtmlPageChrome, PageChrome
from src.services.help.content_source import (
    ContentSource,
    ContentSourceFactory,
    FileContentSource,
    HttpContentSource,
)
from src.services.help.page import HelpPage, HelpPageService
from src.services.help.registry import (
    DirectoryModuleRegistryProvider,
    HelpRegistry,
    ModuleHelpRegistry,
    ModuleRegistryProvider,
    StaticModuleRegistryProvider,
    load_help_registry,
    load_module_registry,
)
from src.services.help.renderer import EntryRenderer
from src.services.help.resolver import EntryResolver, Resolution
from src.services.presentation.error_handler import ErrorPresentationLayer


def create_help_page_service(
    settings: Optional[HelpSettings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> HelpPageService:
    """
    Create the help page service from configuration.

    Args:
        settings: Configuration (defaults to the global settings)
        transport: Optional httpx transport for HTTP help pages

    Returns:
        HelpPageService reading the configured definition files

    Raises:
        RegistryError: If the global registry cannot be loaded
    """
    settings = settings or get_settings()

    resolver = EntryResolver(
        load_help_registry(settings.registry_path),
        DirectoryModuleRegistryProvider(settings.modules_path),
        main_module=settings.main_module,
    )
    chrome = HtmlPageChrome(
        header=settings.page_header or DEFAULT_HEADER,
        title=settings.page_title,
        stylesheet=settings.stylesheet,
    )
    sources = ContentSourceFactory(
        settings.help_path, http_timeout=settings.http_timeout, transport=transport
    )
    renderer = EntryRenderer(chrome, sources.for_link, language=settings.language)

    return HelpPageService(
        resolver, renderer, ErrorPresentationLayer(language=settings.language)
    )


__all__ = [
    "ContentSource",
    "ContentSourceFactory",
    "DirectoryModuleRegistryProvider",
    "EntryRenderer",
    "EntryResolver",
    "ErrorPresentationLayer",
    "FileContentSource",
    "HelpPage",
    "HelpPageService",
    "HelpRegistry",
    "HtmlPageChrome",
    "HttpContentSource",
    "ModuleHelpRegistry",
    "ModuleRegistryProvider",
    "PageChrome",
    "Resolution",
    "StaticModuleRegistryProvider",
    "create_help_page_service",
    "load_help_registry",
    "load_module_registry",
]
