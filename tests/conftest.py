"""Shared pytest fixtures for all test types."""

import json
from pathlib import Path

import pytest

from src.lib.config import reset_settings
from src.models import CrossReference, HelpEntry
from src.services.help.registry import (
    HelpRegistry,
    ModuleHelpRegistry,
    StaticModuleRegistryProvider,
)
from src.services.help.resolver import EntryResolver


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reset global settings around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def greeting_entry() -> HelpEntry:
    """Templated entry with two placeholders."""
    return HelpEntry(headline="Greeting", body="Hello %s, code %s")


@pytest.fixture
def see_also_entry() -> HelpEntry:
    """Templated entry with a linked and a plain cross-reference."""
    return HelpEntry(
        headline="Server address",
        body="Address of your LDAP server.",
        see_also=[
            CrossReference(text="Topic A", link="help.php?HelpNumber=5"),
            CrossReference(text="Topic B"),
        ],
    )


@pytest.fixture
def external_entry() -> HelpEntry:
    """Entry streamed from an external source."""
    return HelpEntry(is_external=True, link="foo.inc")


@pytest.fixture
def global_registry(greeting_entry, see_also_entry, external_entry) -> HelpRegistry:
    """Global registry with a few entries."""
    return HelpRegistry(
        {
            "100": greeting_entry,
            201: see_also_entry,
            "250": external_entry,
            "uid": HelpEntry(headline="Global uid", body="Global user name help."),
        }
    )


@pytest.fixture
def posix_registry() -> ModuleHelpRegistry:
    """Module registry with plain and scoped entries."""
    return ModuleHelpRegistry(
        "posixAccount",
        entries={"uid": HelpEntry(headline="User name", body="Module user name help.")},
        scoped={
            "host": {"uid": HelpEntry(headline="Host name", body="Host name help.")},
        },
    )


@pytest.fixture
def resolver(global_registry, posix_registry) -> EntryResolver:
    """Resolver over the sample registries."""
    return EntryResolver(
        global_registry,
        StaticModuleRegistryProvider({"posixAccount": posix_registry}),
    )


@pytest.fixture
def help_dir(tmp_path) -> Path:
    """Help directory with definition files and an external page."""
    root = tmp_path / "help"
    (root / "modules").mkdir(parents=True)

    (root / "help.json").write_text(
        json.dumps(
            {
                "100": {"Headline": "Greeting", "Text": "Hello %s, code %s"},
                "201": {
                    "Headline": "Server address",
                    "Text": "Address of your LDAP server.",
                    "SeeAlso": [
                        {"text": "Topic A", "link": "help.php?HelpNumber=5"},
                        {"text": "Topic B"},
                    ],
                },
                "250": {"ext": "TRUE", "Link": "foo.inc"},
                "251": {"ext": "TRUE", "Link": "missing.inc"},
            }
        ),
        encoding="utf-8",
    )
    (root / "modules" / "posixAccount.json").write_text(
        json.dumps(
            {
                "help": {"uid": {"Headline": "User name", "Text": "Module user name help."}},
                "scopes": {
                    "host": {"uid": {"Headline": "Host name", "Text": "Host %s help."}}
                },
            }
        ),
        encoding="utf-8",
    )
    (root / "foo.inc").write_text("<p>External <b>content</b></p>\n", encoding="utf-8")

    return root


@pytest.fixture
def help_env(monkeypatch, help_dir) -> Path:
    """Point the configuration at the temporary help directory."""
    monkeypatch.setenv("LAM_HELP_DIR", str(help_dir))
    monkeypatch.setenv("LAM_HELP_REGISTRY", str(help_dir / "help.json"))
    monkeypatch.setenv("LAM_MODULES_DIR", str(help_dir / "modules"))
    monkeypatch.delenv("LAM_LANGUAGE", raising=False)
    monkeypatch.delenv("LAM_MAIN_MODULE", raising=False)
    return help_dir
