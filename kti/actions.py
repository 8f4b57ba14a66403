#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Per-action state machine: IDLE -> PENDING -> SUCCESS | FAILURE
"""
# ========================================================
# IMPORTS
# ========================================================
import threading
from contextlib import contextmanager
from enum import Enum
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.errors import ActionBusyError, InventoryError


# ========================================================
# CLASSES
# ========================================================
class ActionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class ActionTracker:
    """
    Tracks one kind of user action. A second begin() while PENDING is a
    duplicate submission and raises ActionBusyError.
    """

    def __init__(self, name: str):
        self.name = name
        self.state = ActionState.IDLE
        self.error: str | None = None
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self.state is ActionState.PENDING

    def begin(self) -> None:
        with self._lock:
            if self.state is ActionState.PENDING:
                raise ActionBusyError(
                    f"Action already in progress: {self.name}")
            self.state = ActionState.PENDING
            self.error = None

    def succeed(self) -> None:
        with self._lock:
            self.state = ActionState.SUCCESS
            self.error = None

    def fail(self, message: str) -> None:
        with self._lock:
            self.state = ActionState.FAILURE
            self.error = message

    def reset(self) -> None:
        with self._lock:
            self.state = ActionState.IDLE
            self.error = None

    @contextmanager
    def run(self):
        """
        Wrap one attempt. InventoryErrors mark FAILURE and propagate,
        anything else leaves FAILURE behind too.
        """
        self.begin()
        try:
            yield self
        except InventoryError as e:
            self.fail(e.message)
            raise
        except Exception as e:
            self.fail(str(e) or e.__class__.__name__)
            raise
        else:
            self.succeed()


class ActionBoard:
    """The trackers of one inventory screen, keyed by action name."""
    ACTIONS = ("fetch", "save", "delete", "export")

    def __init__(self):
        self._trackers = {name: ActionTracker(name) for name in self.ACTIONS}

    def __getitem__(self, name: str) -> ActionTracker:
        return self._trackers[name]
