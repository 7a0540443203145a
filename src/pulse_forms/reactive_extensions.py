from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from pulse_forms.reactive import Signal


class ReactiveDict(MutableMapping[str, Any]):
	"""A mapping with per-key reactivity.

	- Reading a key registers a dependency on that key's Signal
	- Writing a key updates only that key's Signal
	- Deleting a key writes `None` to its Signal (preserving subscriptions)
	- Iteration and len are NOT reactive; use explicit key reads inside computeds

	The signals are the only storage: writing one of them directly is seen by
	every read, `items()`, `values()` and comparisons included. Values are
	stored as-is, so replace nested containers instead of mutating them.
	"""

	__slots__ = ("_signals",)

	def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
		self._signals: dict[str, Signal[Any]] = {}
		if initial:
			for k, v in initial.items():
				self._signals[k] = Signal(v, name=k)

	# --- Mapping protocol ---
	def __getitem__(self, key: str) -> Any:
		return self._signals[key].read()

	def __setitem__(self, key: str, value: Any) -> None:
		self.set(key, value)

	def __delitem__(self, key: str) -> None:
		if key not in self._signals:
			raise KeyError(key)
		self.delete(key)

	def __contains__(self, key: object) -> bool:
		return key in self._signals

	def __iter__(self) -> Iterator[str]:
		# Not reactive; snapshot of keys at iteration time
		return iter(list(self._signals))

	def __len__(self) -> int:
		return len(self._signals)

	def get(self, key: str, default: Any = None) -> Any:
		if key not in self._signals:
			return default
		return self._signals[key].read()

	# --- Mutation helpers ---
	def set(self, key: str, value: Any) -> None:
		sig = self._signals.get(key)
		if sig is None:
			self._signals[key] = Signal(value, name=key)
		else:
			sig.write(value)

	def delete(self, key: str) -> None:
		sig = self._signals.get(key)
		if sig is not None:
			sig.write(None)

	# --- Signal access ---
	def signal(self, key: str) -> Signal[Any]:
		return self._signals[key]

	def signals(self) -> dict[str, Signal[Any]]:
		"""One Signal per key, in insertion order."""
		return dict(self._signals)

	def snapshot(self) -> dict[str, Any]:
		"""Plain, non-reactive copy of the current values."""
		return {k: sig.value for k, sig in self._signals.items()}

	def __eq__(self, other: object) -> bool:
		if isinstance(other, ReactiveDict):
			return self.snapshot() == other.snapshot()
		if isinstance(other, Mapping):
			return self.snapshot() == dict(other)
		return NotImplemented

	def __repr__(self) -> str:
		return f"ReactiveDict({self.snapshot()!r})"
