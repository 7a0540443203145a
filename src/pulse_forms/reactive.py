"""
Fine-grained reactive primitives.

`Signal` holds a mutable value and `Computed` derives a memoized value from
the signals and computeds it reads. Dependencies are tracked automatically:
every read registers itself in the current `Scope`, and a write marks the
computeds downstream as dirty. Dirty computeds are re-evaluated lazily, on
their next read.
"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from typing import Any, Generic, TypeVar

from pulse_forms.errors import CircularDependencyError, ReactiveWriteError

T = TypeVar("T")

# NOTE: globals at the bottom of the file


def same_value(a: Any, b: Any) -> bool:
	"""Equality used to skip redundant writes and unchanged recomputations.

	`1 == True` and `0 == False` in Python, so values of different types
	never count as the same, even when they compare equal. Lists, tuples and
	dicts are compared item by item with the same rule.
	"""
	if a is b:
		return True
	if type(a) is not type(b):
		return False
	if isinstance(a, (list, tuple)):
		return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
	if isinstance(a, dict):
		return a.keys() == b.keys() and all(same_value(v, b[k]) for k, v in a.items())
	return a == b


class Scope:
	"""Records the reactive values read while the scope is active."""

	def __init__(self):
		# Read order is kept, for deterministic re-subscription
		self.deps: list[Signal[Any] | Computed[Any]] = []

	def register_dep(self, value: Signal[Any] | Computed[Any]):
		if value not in self.deps:
			self.deps.append(value)

	def __enter__(self):
		self._token = SCOPE.set(self)
		return self

	def __exit__(self, exc_type, exc_value, exc_traceback):
		SCOPE.reset(self._token)


class Untrack(Scope):
	"""Scope that ignores every read made inside it."""

	def register_dep(self, value: Signal[Any] | Computed[Any]):
		pass


class Signal(Generic[T]):
	def __init__(self, value: T, name: str | None = None):
		self.value = value
		self.name = name
		self.obs: list[Computed[Any]] = []
		self.last_change = -1

	def read(self) -> T:
		scope = SCOPE.get()
		if scope is not None:
			scope.register_dep(self)
		return self.value

	def __call__(self) -> T:
		return self.read()

	def write(self, value: T):
		if same_value(value, self.value):
			return
		increment_epoch()
		self.value = value
		self.last_change = epoch()
		# Observers may unsubscribe while being notified
		for computed in self.obs.copy():
			computed._mark_dirty()

	def __repr__(self) -> str:
		label = f" {self.name}" if self.name else ""
		return f"<Signal{label} value={self.value!r}>"


class Computed(Generic[T]):
	"""Memoized derivation over other reactive values.

	`fn` must be pure: writing to a signal while it runs raises
	`ReactiveWriteError`, and reading itself (directly or through another
	computed) raises `CircularDependencyError`. A failed evaluation leaves the
	computed unevaluated, so the next read tries again.
	"""

	def __init__(self, fn: Callable[[], T], name: str | None = None):
		self.fn = fn
		self.value: T = None  # pyright: ignore[reportAttributeAccessIssue]
		self.name = name
		self.dirty = False
		self.evaluating = False
		# Epoch of the last value change and of the last evaluation
		self.last_change: int = -1
		self.last_run: int = -1
		self.deps: list[Signal[Any] | Computed[Any]] = []
		self.obs: list[Computed[Any]] = []

	def read(self) -> T:
		if self.evaluating:
			raise CircularDependencyError(self.name)
		scope = SCOPE.get()
		if scope is not None:
			scope.register_dep(self)
		self._refresh()
		return self.value

	def __call__(self) -> T:
		return self.read()

	def _mark_dirty(self):
		if self.dirty:
			return
		self.dirty = True
		for computed in self.obs.copy():
			computed._mark_dirty()

	def _evaluate(self):
		started_at = epoch()
		scope = Scope()
		self.evaluating = True
		try:
			with scope:
				value = self.fn()
		finally:
			self.evaluating = False
		if epoch() != started_at:
			raise ReactiveWriteError(self.name)

		changed = self.last_change < 0 or not same_value(value, self.value)
		self.value = value
		self.dirty = False
		self.last_run = started_at
		if changed:
			self.last_change = started_at
		self._subscribe(scope.deps)

	def _subscribe(self, deps: list[Signal[Any] | Computed[Any]]):
		previous = set(self.deps)
		current = set(deps)
		for dep in deps:
			if dep not in previous:
				dep.obs.append(self)
		for dep in previous - current:
			dep.obs.remove(self)
		self.deps = deps

	def _refresh(self):
		if self.last_run < 0:
			self._evaluate()
			return
		if not self.dirty:
			return
		# Only re-run if one of the dependencies actually changed value
		for dep in self.deps:
			if isinstance(dep, Computed):
				dep._refresh()
			if dep.last_change > self.last_run:
				self._evaluate()
				return
		self.dirty = False

	def __repr__(self) -> str:
		label = f" {self.name}" if self.name else ""
		return f"<Computed{label}>"


def is_reactive(value: Any) -> bool:
	return isinstance(value, (Signal, Computed))


# --- Globals ---
class Epoch:
	current: int = 0


EPOCH = ContextVar("pulse_forms_epoch", default=Epoch())
SCOPE: ContextVar[Scope | None] = ContextVar("pulse_forms_scope", default=None)


def epoch():
	return EPOCH.get().current


def increment_epoch():
	EPOCH.get().current += 1
