"""Core domain layer - entities, interfaces, services and exceptions."""

from laundry_invoice.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
