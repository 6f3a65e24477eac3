"""LDAP Account Manager help center."""

__version__ = "0.1.0"
