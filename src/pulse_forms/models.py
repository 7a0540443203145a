"""
Descriptor data model.

A `Descriptor` is the leaf unit of a form. Descriptors are assembled into a
`DescriptorNode`: a single descriptor, a sequence of nodes, or a reactive
value whose current value is itself a node. Conditional branches are
represented by the last case, which lets a static list and a dynamically
shaped sub-tree be handled the same way by the resolver.

To add a new descriptor type, subclass `Descriptor` with the type-specific
fields and register a `Binding` whose `type` matches.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from pulse_forms.reactive import Computed, Signal


@dataclass(eq=False)
class Descriptor:
	type: str
	label: str = ""
	model: Signal[Any] | None = None
	# Assigned once by `create_descriptor`, never by user code
	id: str = field(default="", init=False)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} type={self.type!r} label={self.label!r}>"


@dataclass(eq=False, repr=False)
class SimpleDescriptor(Descriptor):
	"""Descriptor for types that don't need extra fields (text inputs, ...)."""


DescriptorNode: TypeAlias = (
	Descriptor
	| Sequence["DescriptorNode"]
	| Signal["DescriptorNode"]
	| Computed["DescriptorNode"]
)

Transformer: TypeAlias = Callable[[Any], DescriptorNode]


@dataclass(frozen=True)
class Binding:
	"""Associates one or more descriptor types to a component and a transformer.

	`component` is an opaque handle for the host renderer and is never
	inspected. `transformer` expands a freshly created descriptor into the
	node that will be resolved in its place.
	"""

	type: str | Sequence[str]
	component: Any = None
	transformer: Transformer | None = None

	def types(self) -> list[str]:
		if isinstance(self.type, str):
			return [self.type]
		return list(self.type)
