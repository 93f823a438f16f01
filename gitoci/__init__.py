"""Configuration, OCI artifact types and command line for the git-remote-oci helper."""

__version__ = "0.1.0"
__all__ = ["actions", "cli", "config", "oci"]