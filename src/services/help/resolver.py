"""Entry resolver: maps a help request to a stored help entry."""

import logging
from typing import Optional, Union

from src.models.help_entry import HelpEntry, NotFound
from src.services.help.registry import HelpRegistry, ModuleRegistryProvider

logger = logging.getLogger(__name__)

Resolution = Union[HelpEntry, NotFound]


class EntryResolver:
    """
    Selects a help entry from the global registry or a module registry.

    Example:
        resolver = EntryResolver(global_registry, module_provider)
        result = resolver.resolve("201", module="posixAccount", scope="user")
        if isinstance(result, NotFound):
            ...
    """

    def __init__(
        self,
        global_registry: HelpRegistry,
        module_provider: Optional[ModuleRegistryProvider] = None,
        main_module: str = "main",
    ):
        """
        Initialize the resolver.

        Args:
            global_registry: Registry used when no module is requested
            module_provider: Source of module registries
            main_module: Module name that selects the global registry
        """
        self._global = global_registry
        self._modules = module_provider
        self._main_module = main_module

    def resolve(
        self,
        identifier: str,
        module: Optional[str] = None,
        scope: Optional[str] = None,
    ) -> Resolution:
        """
        Resolve a help identifier.

        Args:
            identifier: Help identifier
            module: Module name; None or the main module selects the global registry
            scope: Scope within the module (ignored without module)

        Returns:
            The stored HelpEntry, or NotFound carrying identifier and module
        """
        if module and module != self._main_module:
            return self._resolve_module(identifier, module, scope)

        entry = self._global.get(identifier)
        if entry is None:
            logger.info(f"Help number {identifier} not found in global registry")
            return NotFound(identifier=identifier)
        return entry

    def _resolve_module(
        self, identifier: str, module: str, scope: Optional[str]
    ) -> Resolution:
        registry = self._modules.get_module(module) if self._modules else None
        if registry is None:
            logger.info(f"No help registry for module '{module}'")
            return NotFound(identifier=identifier, module=module)

        entry = registry.get_help(identifier, scope)
        if entry is None:
            logger.info(
                f"Help id {identifier} not found for module '{module}' (scope={scope})"
            )
            return NotFound(identifier=identifier, module=module)
        return entry
