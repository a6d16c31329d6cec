"""
Module Automation - Core

Automatic singleton registration and start-time activation of the routers
and projections an event-sourcing module owns.

Provides:
- Module contract with replaceable lifecycle hook slots
- Hook wrapping that appends registration and activation actions
- Error types for modules that do not satisfy the contract
- Protocols for the injector the host supplies

Usage:
    from core import Module

    module = Module("orders", injector, routers=[OrderRouter],
                    projections=[OrderSummaryProjection])
    module.on_dependencies_ready()
    module.initialize()
    module.start()
"""

from core.errors import (
    ErrorContext,
    ErrorSeverity,
    ModuleContractError,
    ModuleError,
)
from core.lifecycle import (
    INITIALIZE_SLOT,
    START_SLOT,
    activate_components,
    augment_lifecycle,
    owned_components,
    register_components,
    wrap_hook,
)
from core.module import Module, noop_hook
from core.types import (
    Binding,
    ComponentId,
    HookFn,
    Injector,
    LifecycleModule,
    PostAction,
)

__all__ = [
    # Errors
    "ErrorContext",
    "ErrorSeverity",
    "ModuleContractError",
    "ModuleError",
    # Lifecycle
    "INITIALIZE_SLOT",
    "START_SLOT",
    "activate_components",
    "augment_lifecycle",
    "owned_components",
    "register_components",
    "wrap_hook",
    # Module
    "Module",
    "noop_hook",
    # Types
    "Binding",
    "ComponentId",
    "HookFn",
    "Injector",
    "LifecycleModule",
    "PostAction",
]

__version__ = "0.1.0"
