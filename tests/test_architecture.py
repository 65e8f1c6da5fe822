"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, errors and other models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("transit_trail.domain.models*")
        .should_not_import("transit_trail.adapters*")
        .should_not_import("transit_trail.application*")
        .should_not_import("transit_trail.domain.ports*")
        .may_import("transit_trail.domain.models*")
        .may_import("transit_trail.domain.errors")
        .check("transit_trail", only_direct_imports=True)
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("transit_trail.domain.ports*")
        .should_not_import("transit_trail.adapters*")
        .should_not_import("transit_trail.application*")
        .may_import("transit_trail.domain.ports*")
        .may_import("transit_trail.domain.models*")
        .check("transit_trail")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("transit_trail.application*")
        .should_not_import("transit_trail.adapters*")
        .may_import("transit_trail.domain*")
        .may_import("transit_trail.application*")
        .check("transit_trail")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("transit_trail.adapters*")
        .should_not_import("transit_trail.application*")
        .may_import("transit_trail.domain*")
        .may_import("transit_trail.adapters*")
        .check("transit_trail", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not depend on outer layers."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("transit_trail.domain*")
        .should_not_import("transit_trail.adapters*")
        .should_not_import("transit_trail.application*")
        .may_import("transit_trail.domain*")
        .check("transit_trail", only_direct_imports=True)
    )
