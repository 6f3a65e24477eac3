"""Help registries: the global help table and per-module help tables.

Registries are built once from static definition files and are
read-only afterwards, so a single instance can be shared between
concurrent requests.

Definition file formats (JSON):

    global:  {"<id>": {entry}, ...}
    module:  {"help": {"<id>": {entry}, ...},
              "scopes": {"<scope>": {"<id>": {entry}, ...}, ...}}

where {entry} uses the keys Headline, Text, ext, Link and SeeAlso.
"""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from src.lib.exceptions import RegistryError, ValidationError
from src.models.help_entry import HelpEntry

logger = logging.getLogger(__name__)

# Module names double as file names
MODULE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def _freeze(entries: Mapping[Any, HelpEntry]) -> Mapping[str, HelpEntry]:
    """Normalise identifiers to str keys and make the mapping read-only."""
    return MappingProxyType({str(key): entry for key, entry in entries.items()})


class HelpRegistry:
    """
    Global help registry: identifier -> HelpEntry.

    Identifiers are compared as strings, so 201 and "201" are the same key.
    """

    def __init__(self, entries: Mapping[Any, HelpEntry]):
        self._entries = _freeze(entries)

    def get(self, identifier: Any) -> Optional[HelpEntry]:
        """
        Look up an entry.

        Args:
            identifier: Help identifier

        Returns:
            The stored HelpEntry or None if absent
        """
        return self._entries.get(str(identifier))

    def identifiers(self) -> list[str]:
        """List all identifiers in definition order."""
        return list(self._entries)

    @property
    def entries(self) -> Mapping[str, HelpEntry]:
        """Read-only view of all entries."""
        return self._entries

    def __contains__(self, identifier: object) -> bool:
        return str(identifier) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


class ModuleHelpRegistry:
    """
    Help registry private to one module.

    Entries are keyed by identifier, and scoped entries additionally by
    a scope that distinguishes contexts within the module (e.g. list
    view vs. edit view).
    """

    def __init__(
        self,
        name: str,
        entries: Optional[Mapping[Any, HelpEntry]] = None,
        scoped: Optional[Mapping[str, Mapping[Any, HelpEntry]]] = None,
    ):
        self.name = name
        self._entries = _freeze(entries or {})
        self._scoped = MappingProxyType(
            {str(scope): _freeze(items) for scope, items in (scoped or {}).items()}
        )

    def get_help(self, identifier: Any, scope: Optional[str] = None) -> Optional[HelpEntry]:
        """
        Look up an entry of this module.

        Scoped lookups only consider entries defined for that scope.

        Args:
            identifier: Help identifier
            scope: Optional scope discriminator

        Returns:
            The stored HelpEntry or None if absent
        """
        if scope is not None:
            return self._scoped.get(str(scope), {}).get(str(identifier))
        return self._entries.get(str(identifier))

    @property
    def scopes(self) -> list[str]:
        """List the scopes defined by this module."""
        return list(self._scoped)

    def __len__(self) -> int:
        return len(self._entries) + sum(len(items) for items in self._scoped.values())


class ModuleRegistryProvider(Protocol):
    """
    Contract for obtaining module registries by module name.

    Unknown modules yield None, which callers treat exactly like a
    missing entry.
    """

    def get_module(self, name: str) -> Optional[ModuleHelpRegistry]:
        """
        Get the help registry of a module.

        Args:
            name: Module name (e.g., "inetOrgPerson")

        Returns:
            ModuleHelpRegistry or None if the module is unknown
        """
        ...


class StaticModuleRegistryProvider:
    """In-memory provider for registries built in code."""

    def __init__(self, modules: Optional[Mapping[str, ModuleHelpRegistry]] = None):
        self._modules = MappingProxyType(dict(modules or {}))

    def get_module(self, name: str) -> Optional[ModuleHelpRegistry]:
        """Get the help registry of a module."""
        return self._modules.get(name)


class DirectoryModuleRegistryProvider:
    """
    Provider reading one <module>.json file per module.

    Registries are loaded on first use and cached for the lifetime of
    the provider.

    Directory structure:
        {modules_dir}/
        ├── inetOrgPerson.json
        ├── posixAccount.json
        └── ...
    """

    def __init__(self, modules_dir: Path | str):
        self._modules_dir = Path(modules_dir)
        self._cache: dict[str, ModuleHelpRegistry] = {}

    def module_path(self, name: str) -> Path:
        """Get the definition file of a module."""
        return self._modules_dir / f"{name}.json"

    def get_module(self, name: str) -> Optional[ModuleHelpRegistry]:
        """
        Get the help registry of a module.

        Raises:
            RegistryError: If the module file exists but cannot be loaded
        """
        if name in self._cache:
            return self._cache[name]

        if not MODULE_NAME_PATTERN.match(name):
            logger.warning(f"Rejected invalid module name: {name!r}")
            return None

        path = self.module_path(name)
        if not path.is_file():
            logger.debug(f"No help definitions for module '{name}' at {path}")
            return None

        registry = load_module_registry(name, path)
        self._cache[name] = registry
        return registry


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RegistryError(f"Cannot read help definitions: {e}", path=str(path))
    except json.JSONDecodeError as e:
        raise RegistryError(f"Invalid JSON in help definitions: {e}", path=str(path))


def _parse_entries(raw: Any, path: Path, context: str) -> dict[str, HelpEntry]:
    if not isinstance(raw, dict):
        raise RegistryError(f"{context} must be a JSON object", path=str(path))

    entries: dict[str, HelpEntry] = {}
    for identifier, data in raw.items():
        try:
            entries[str(identifier)] = HelpEntry.model_validate(data)
        except (PydanticValidationError, ValidationError) as e:
            raise RegistryError(
                f"Invalid help entry '{identifier}' in {context}: {e}", path=str(path)
            )
    return entries


def load_help_registry(path: Path | str) -> HelpRegistry:
    """
    Load the global help registry from a JSON definition file.

    Args:
        path: Definition file

    Returns:
        HelpRegistry with all entries

    Raises:
        RegistryError: If the file is unreadable or contains invalid entries
    """
    path = Path(path)
    entries = _parse_entries(_read_json(path), path, "global help registry")
    logger.debug(f"Loaded {len(entries)} help entries from {path}")
    return HelpRegistry(entries)


def load_module_registry(name: str, path: Path | str) -> ModuleHelpRegistry:
    """
    Load a module help registry from a JSON definition file.

    Args:
        name: Module name
        path: Definition file

    Returns:
        ModuleHelpRegistry with plain and scoped entries

    Raises:
        RegistryError: If the file is unreadable or contains invalid entries
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise RegistryError(f"Help definitions of module '{name}' must be a JSON object", path=str(path))

    entries = _parse_entries(data.get("help", {}), path, f"module '{name}'")

    raw_scopes = data.get("scopes", {})
    if not isinstance(raw_scopes, dict):
        raise RegistryError(f"Scopes of module '{name}' must be a JSON object", path=str(path))
    scoped = {
        str(scope): _parse_entries(items, path, f"module '{name}' scope '{scope}'")
        for scope, items in raw_scopes.items()
    }

    registry = ModuleHelpRegistry(name, entries, scoped)
    logger.debug(f"Loaded {len(registry)} help entries for module '{name}' from {path}")
    return registry
