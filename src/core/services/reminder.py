"""Reminder orchestration: wait, then alert until stopped.

The CLI builds a `ReminderConfig` and delegates the whole flow to
`run_reminder`. Side-effects are pushed to the edges: printing goes through a
`Notifier` and waiting through an injectable `sleep`, which keeps the loop
testable without a terminal or real delays.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from core.domain.models import ReminderConfig, ReminderState
from core.interfaces.notifier import Notifier


@dataclass
class ReminderHooks:
    """Optional callbacks for UI layers and tests."""

    state_changed: Callable[[ReminderState], None] | None = None


def _enter(hooks: ReminderHooks, state: ReminderState) -> None:
    logger.debug("Reminder state -> {}", state.value)
    if hooks.state_changed is not None:
        hooks.state_changed(state)


def run_reminder(
    config: ReminderConfig,
    notifier: Notifier,
    *,
    hooks: ReminderHooks | None = None,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Run one reminder to completion.

    Returns the number of alert cycles emitted. Without `once` it never
    returns: the loop only ends when the process is interrupted.
    """

    hooks = hooks or ReminderHooks()
    sleep = sleep or time.sleep

    _enter(hooks, ReminderState.IDLE)
    notifier.announce(config.delta)
    _enter(hooks, ReminderState.WAITING)

    logger.debug("Sleeping {} second(s)", config.delta.total_seconds)
    sleep(config.delta.total_seconds)

    if config.clear_screen:
        notifier.clear()
    _enter(hooks, ReminderState.ALERTING)

    cycles = 0
    while True:
        notifier.alert(config.message)
        cycles += 1
        logger.debug("Alert cycle {} emitted", cycles)
        if config.once:
            break
        sleep(config.repeat_interval_seconds)

    _enter(hooks, ReminderState.DONE)
    return cycles
