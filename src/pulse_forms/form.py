"""
Form orchestration.

`use_form` binds a plain model to reactive state and keeps two derived values
up to date: the flat list of visible descriptors (`configuration`) and the
plain values of those descriptors keyed by field name (`result`).

```python
form = use_form(
    {"subscribe": False, "email": ""},
    lambda m: create_descriptor(
        BinaryDescriptor(
            label="Subscribe?",
            model=m["subscribe"],
            positive=create_descriptor(SimpleDescriptor("text", "Email", m["email"])),
        )
    ),
)
form.values()  # {"subscribe": False}
form.set("subscribe", True)
form.values()  # {"subscribe": True, "email": ""}
```
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pulse_forms.models import Descriptor, DescriptorNode
from pulse_forms.reactive import Computed, Signal
from pulse_forms.reactive_extensions import ReactiveDict
from pulse_forms.registry import BINDING_REGISTRY, BindingRegistry
from pulse_forms.resolver import resolve

logger = logging.getLogger(__name__)

FormBuilder = Callable[[dict[str, Signal[Any]]], DescriptorNode]


class Form:
	state: ReactiveDict
	signals: dict[str, Signal[Any]]
	names: dict[Signal[Any], str]
	configuration: Computed[list[Descriptor]]
	result: Computed[dict[str, Any]]
	registry: BindingRegistry

	def __init__(
		self,
		initial_model: Mapping[str, Any],
		builder: FormBuilder,
		registry: BindingRegistry | None = None,
	):
		self.state = ReactiveDict(copy.deepcopy(dict(initial_model)))
		# One signal per property of the initial model
		self.signals = self.state.signals()
		# Descriptors only carry their signal, map it back to the field name
		self.names = {signal: name for name, signal in self.signals.items()}
		self._builder = builder
		# The tree is built lazily, possibly outside of the block that was
		# active when the form was created
		self.registry = registry if registry is not None else BINDING_REGISTRY.get()

		# Only re-run the builder when a signal it reads directly changes.
		# Branches read their own signals, which only triggers a new resolution
		# and keeps descriptor ids stable.
		self._tree = Computed(self._build, name="form.tree")
		self.configuration = Computed(self._resolve, name="form.configuration")
		self.result = Computed(self._extract, name="form.result")

	def _build(self) -> DescriptorNode:
		token = BINDING_REGISTRY.set(self.registry)
		try:
			return self._builder(self.signals)
		finally:
			BINDING_REGISTRY.reset(token)

	def _resolve(self) -> list[Descriptor]:
		descriptors = resolve(self._tree())
		logger.debug("Resolved %d visible descriptors", len(descriptors))
		return descriptors

	def _extract(self) -> dict[str, Any]:
		values: dict[str, Any] = {}
		for descriptor in self.configuration():
			model = descriptor.model
			if model is None:
				continue
			# Fields bound to something else than a model property are skipped
			name = self.names.get(model)
			if name is None:
				continue
			values[name] = model()
		return values

	def descriptors(self) -> list[Descriptor]:
		return self.configuration()

	def values(self) -> dict[str, Any]:
		return self.result()

	def get(self, name: str) -> Any:
		return self.state[name]

	def set(self, name: str, value: Any):
		"""Writes a field of the model. Only the fields of the initial model
		exist, unknown names raise `KeyError`."""
		if name not in self.signals:
			raise KeyError(name)
		self.signals[name].write(value)

	def __repr__(self) -> str:
		return f"<Form fields={list(self.signals)}>"


def use_form(
	initial_model: Mapping[str, Any],
	builder: FormBuilder,
	registry: BindingRegistry | None = None,
) -> Form:
	return Form(initial_model, builder, registry)
