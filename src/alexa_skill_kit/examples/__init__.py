"""Example skills."""
