"""A message queue that dispatches calls to procedures registered per element."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Message:
    """A message code with an optional payload."""

    code: int
    data: Any = None


@dataclass(frozen=True)
class Call:
    """A message addressed to an element."""

    target: int
    message: Message


@dataclass
class SystemGlobals:
    """State shared by every procedure: the call queue, error and exit queues and element data."""

    calls: deque[Call] = field(default_factory=deque)
    errors: deque[Message] = field(default_factory=deque)
    exit_codes: deque[int] = field(default_factory=deque)
    data: list[Any] = field(default_factory=list)
    global_data: Any = None


Proc = Callable[[SystemGlobals], int]


class System:
    """Registry of procedures and elements that processes queued calls one at a time."""

    def __init__(self) -> None:
        self.state = SystemGlobals()
        self.procs: list[Proc] = []
        self.proc_ids: list[int] = []

    @property
    def nprocs(self) -> int:
        return len(self.procs)

    @property
    def nelements(self) -> int:
        return len(self.proc_ids)

    def run_next(self) -> bool:
        """Run the procedure for the call at the head of the queue.

        The call stays at the head while its procedure runs and is removed
        afterwards.  Returns ``False`` when the queue was empty.
        """
        if not self.state.calls:
            return False
        call = self.state.calls[0]
        proc = self.procs[self.proc_ids[call.target]]
        proc(self.state)
        self.state.calls.popleft()
        return True

    def add_call(self, call: Call) -> None:
        self.state.calls.append(call)

    def add_tcall(self, target: int, msg: Message) -> None:
        self.state.calls.append(Call(target, msg))

    def broadcast_call(self, targets: Iterable[int], msg: Message) -> None:
        """Queue *msg* once for every target, in order."""
        self.state.calls.extend(Call(target, msg) for target in targets)

    def add_proc(self, name: str, proc: Proc) -> int:
        """Register *proc* and return its id."""
        self.procs.append(proc)
        return len(self.procs) - 1

    def add_element(self, name: str, proc_id: int) -> int:
        """Register an element handled by *proc_id* and return the element's id."""
        self.state.data.append(None)
        self.proc_ids.append(proc_id)
        return len(self.proc_ids) - 1

    def set_element_data(self, element_id: int, data: Any) -> None:
        self.state.data[element_id] = data