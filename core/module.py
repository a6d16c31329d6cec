"""
Module Automation - Module Contract

A ``Module`` is the unit the host composes: it carries the injector it
registers into, the names of the modules it depends on, the routers and
projections it owns, and two hook slots the host fires during the
initialize and start passes.

Hook slots are ordinary instance attributes. Each holds a callable that is
invoked with the module as its first argument.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from core.lifecycle import augment_lifecycle
from core.types import ComponentId, HookFn, Injector


def noop_hook(module: "Module", *args: Any, **kwargs: Any) -> None:
    """Default hook slot value."""


class Module:
    """
    Event-sourcing application module.

    Usage:
        orders = Module(
            "orders",
            injector,
            dependencies=["accounts"],
            routers=[OrderRouter],
            projections=[OrderSummaryProjection],
        )

        def seed_bindings(module):
            module.injector.map(Clock).as_singleton()

        orders.on_initialize = seed_bindings

        # host, in dependency order
        orders.on_dependencies_ready()
        orders.initialize()
        orders.start()
    """

    def __init__(
        self,
        name: str,
        injector: Injector,
        dependencies: Optional[Iterable[str]] = None,
        routers: Optional[Iterable[ComponentId]] = None,
        projections: Optional[Iterable[ComponentId]] = None,
        on_initialize: Optional[HookFn] = None,
        on_start: Optional[HookFn] = None,
    ):
        self.name = name
        self.injector = injector
        self.dependencies: List[str] = list(dependencies or [])
        self.routers: List[ComponentId] = list(routers or [])
        self.projections: List[ComponentId] = list(projections or [])
        self.on_initialize: HookFn = on_initialize or noop_hook
        self.on_start: HookFn = on_start or noop_hook

    def on_dependencies_ready(self) -> None:
        """Host notification; installs the lifecycle augmentation."""
        augment_lifecycle(self)

    def initialize(self, *args: Any, **kwargs: Any) -> Any:
        return self.on_initialize(self, *args, **kwargs)

    def start(self, *args: Any, **kwargs: Any) -> Any:
        return self.on_start(self, *args, **kwargs)

    def __repr__(self) -> str:
        return (
            f"Module(name={self.name!r}, routers={len(self.routers)}, "
            f"projections={len(self.projections)})"
        )
