"""
Module Automation - Lifecycle Augmentation

Rewrites a module's ``on_initialize`` and ``on_start`` hook slots so the
routers and projections it owns are declared as singletons during the
initialize pass and constructed during the start pass. Module authors only
list component identifiers; no registration code goes into their hooks.

Usage:
    module = Module("orders", injector, routers=[OrderRouter],
                    projections=[OrderSummaryProjection])
    augment_lifecycle(module)   # once, when dependencies are ready

    module.on_initialize(module)  # author hook, then map(...).as_singleton()
    module.on_start(module)       # author hook, then create(...)
"""
from __future__ import annotations

import functools
from typing import Any, List

from core.errors import ErrorContext, ModuleContractError
from core.types import ComponentId, HookFn, LifecycleModule, PostAction
from observability.logging import LifecycleLogger, LogContext
from observability.tracing import create_span

INITIALIZE_SLOT = "on_initialize"
START_SLOT = "on_start"

_log = LifecycleLogger()


def owned_components(module: LifecycleModule) -> List[ComponentId]:
    """
    Return ``routers`` followed by ``projections`` with duplicates removed.

    First-seen order is kept so registration and activation iterate the
    same sequence.
    """
    try:
        union = dict.fromkeys(module.routers)
        union.update(dict.fromkeys(module.projections))
    except TypeError as e:
        raise ModuleContractError(
            f"Module '{module.name}' lists an unhashable component identifier",
            module_name=module.name,
            context=ErrorContext.from_current_span(
                operation="owned_components",
                component="lifecycle",
                module_name=module.name,
            ),
            cause=e,
        ) from e
    return list(union)


def wrap_hook(original: HookFn, post_action: PostAction) -> HookFn:
    """
    Build a hook that runs ``original`` and then ``post_action``.

    Arguments reach ``original`` untouched and its return value is passed
    back. If ``original`` raises, ``post_action`` is skipped and the
    exception propagates as is.
    """

    @functools.wraps(original)
    def hook(module: Any, *args: Any, **kwargs: Any) -> Any:
        result = original(module, *args, **kwargs)
        post_action(module)
        return result

    return hook


def register_components(module: LifecycleModule) -> None:
    """Declare every owned component as a singleton without constructing it."""
    with LogContext(module=module.name, phase="initialize"), create_span(
        "module.register_components", {"module.name": module.name},
    ) as span:
        components = owned_components(module)
        span.set_attribute("module.component_count", len(components))
        for component in components:
            module.injector.map(component).as_singleton()
        _log.components_registered(module.name, len(components))


def activate_components(module: LifecycleModule) -> None:
    """
    Construct every owned component so its side effects take place.

    Iteration stops at the first failing ``create``; components already
    constructed stay constructed.
    """
    with LogContext(module=module.name, phase="start"), create_span(
        "module.activate_components", {"module.name": module.name},
    ) as span:
        components = owned_components(module)
        span.set_attribute("module.component_count", len(components))
        for component in components:
            module.injector.create(component)
        _log.components_activated(module.name, len(components))


def augment_lifecycle(module: LifecycleModule) -> None:
    """
    Wrap both hook slots of ``module`` with the phase actions.

    Must run exactly once per module. Calling it again nests another layer
    around the already wrapped hooks.
    """
    for slot in (INITIALIZE_SLOT, START_SLOT):
        if not callable(getattr(module, slot, None)):
            raise ModuleContractError(
                f"Module '{module.name}' has no callable '{slot}' hook",
                module_name=module.name,
                slot=slot,
            )

    module.on_initialize = wrap_hook(module.on_initialize, register_components)
    module.on_start = wrap_hook(module.on_start, activate_components)
    _log.hooks_wrapped(module.name, (INITIALIZE_SLOT, START_SLOT))
