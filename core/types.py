"""
Module Automation - Type Definitions

Type aliases and Protocol classes describing the collaborators the
lifecycle augmenter consumes but does not own: the injector supplied by
the host and the module whose hook slots are rewritten.

Usage:
    from core.types import ComponentId, HookFn, Injector

    def register(injector: Injector, component: ComponentId) -> None:
        injector.map(component).as_singleton()
"""
from __future__ import annotations

from typing import (
    Any,
    Callable,
    Hashable,
    List,
    Protocol,
    runtime_checkable,
)

# =============================================================================
# TYPE ALIASES
# =============================================================================

# Injector key for a router or projection, by convention the class itself
ComponentId = Hashable

# Hook slot value, always invoked with the owning module as first argument
HookFn = Callable[..., Any]

# Phase action run after the original hook, receives the module only
PostAction = Callable[[Any], None]


# =============================================================================
# PROTOCOLS - External contracts
# =============================================================================

@runtime_checkable
class Binding(Protocol):
    """Builder returned by ``Injector.map``."""

    def as_singleton(self) -> Any:
        """Scope the mapping so it resolves to one shared instance."""
        ...


@runtime_checkable
class Injector(Protocol):
    """
    Injector capability supplied by the host.

    ``map`` declares a binding without constructing anything. ``create``
    resolves and constructs the component, recursively resolving its own
    dependencies, and must hand back the cached instance for singleton
    bindings on repeated calls.

    What happens when the same identifier is mapped twice (across modules,
    or by an author hook and then by the registrar) is the injector's own
    policy. The augmenter never maps an identifier twice for one module.
    """

    def map(self, component: ComponentId) -> Binding:
        ...

    def create(self, component: ComponentId) -> Any:
        ...


@runtime_checkable
class LifecycleModule(Protocol):
    """Shape of a module the augmenter can operate on."""

    name: str
    injector: Injector
    routers: List[ComponentId]
    projections: List[ComponentId]
    on_initialize: HookFn
    on_start: HookFn
