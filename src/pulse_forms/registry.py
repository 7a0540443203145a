from __future__ import annotations

import logging
from collections.abc import Sequence
from contextvars import ContextVar, Token
from dataclasses import replace
from typing import Any

from pulse_forms.errors import BindingLookupError
from pulse_forms.models import Binding

logger = logging.getLogger(__name__)


class BindingRegistry:
	"""Maps descriptor types to their binding. Can be used as a context manager
	to make it the active registry for the enclosed block."""

	def __init__(self, bindings: Binding | Sequence[Binding] | None = None):
		self._bindings: dict[str, Binding] = {}
		self._token: Token[BindingRegistry] | None = None
		if bindings is not None:
			self.register(bindings)

	def register(self, bindings: Binding | Sequence[Binding]):
		"""Registers every type declared by each binding, one entry per type.
		Later registrations for the same type overwrite earlier ones."""
		if isinstance(bindings, Binding):
			bindings = [bindings]
		for binding in bindings:
			for type_ in binding.types():
				if type_ in self._bindings:
					logger.debug("Overwriting binding for descriptor type %r", type_)
				self._bindings[type_] = replace(binding, type=type_)

	def lookup(self, type_: str) -> Binding:
		binding = self._bindings.get(type_)
		if binding is None:
			raise BindingLookupError(type_)
		return binding

	def get(self, type_: str) -> Binding | None:
		return self._bindings.get(type_)

	def items(self) -> dict[str, Binding]:
		"""Returns a copy of the bindings as a dictionary."""
		return self._bindings.copy()

	def components(self) -> dict[str, Any]:
		"""Component handle of every registered type, for the host renderer."""
		return {type_: b.component for type_, b in self._bindings.items()}

	def clear(self):
		self._bindings.clear()

	def __contains__(self, type_: object) -> bool:
		return type_ in self._bindings

	def __len__(self) -> int:
		return len(self._bindings)

	def __enter__(self) -> "BindingRegistry":
		self._token = BINDING_REGISTRY.set(self)
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		if self._token:
			BINDING_REGISTRY.reset(self._token)
			self._token = None


BINDING_REGISTRY: ContextVar[BindingRegistry] = ContextVar(
	"binding_registry", default=BindingRegistry()
)


def register_descriptors(bindings: Sequence[Binding]):
	BINDING_REGISTRY.get().register(bindings)


def register_descriptor(binding: Binding):
	BINDING_REGISTRY.get().register([binding])


def get_binding(type_: str) -> Binding:
	return BINDING_REGISTRY.get().lookup(type_)


def install(bindings: Binding | Sequence[Binding]) -> BindingRegistry:
	"""Setup entry point: registers the bindings in the active registry.

	Call it once at application startup, before building any form. The
	returned registry exposes `components()` for the host renderer.
	"""
	registry = BINDING_REGISTRY.get()
	registry.register(bindings)
	logger.debug("Installed bindings for %d descriptor types", len(registry))
	return registry
