"""
Built-in descriptor types.

They are ordinary plugins: each one is a `Descriptor` subclass plus a
transformer attaching conditional sub-trees keyed on the field's own value.
Register them with `install(builtin_bindings(...))`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pulse_forms.models import Binding, Descriptor, DescriptorNode
from pulse_forms.reactive import Computed


def _model_value(descriptor: Descriptor) -> Any:
	return descriptor.model() if descriptor.model is not None else None


@dataclass(eq=False, repr=False)
class BinaryDescriptor(Descriptor):
	type: str = "binary"
	positive: DescriptorNode | None = None
	negative: DescriptorNode | None = None


def binary_transformer(descriptor: BinaryDescriptor) -> DescriptorNode:
	positive, negative = descriptor.positive, descriptor.negative

	# No related fields, just the field itself
	if positive is None and negative is None:
		return descriptor

	def branch() -> DescriptorNode:
		selected = positive if _model_value(descriptor) is True else negative
		# No related fields in the active branch
		return selected if selected is not None else []

	return [descriptor, Computed(branch, name=f"{descriptor.id}.branch")]


@dataclass
class SelectOption:
	value: str
	label: str | None = None
	related: DescriptorNode | None = None


@dataclass(eq=False, repr=False)
class SelectDescriptor(Descriptor):
	type: str = "select"
	options: Sequence[str | SelectOption] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class MultipleSelectDescriptor(SelectDescriptor):
	type: str = "multiple-select"


def select_transformer(descriptor: SelectDescriptor) -> DescriptorNode:
	# Options are provided manually in the configuration, only the ones with
	# related fields can contribute a branch
	branching = [
		option
		for option in descriptor.options
		if isinstance(option, SelectOption) and option.related is not None
	]
	multiple = descriptor.type == "multiple-select"

	def is_selected(option: SelectOption) -> bool:
		value = _model_value(descriptor)
		if multiple:
			return value is not None and option.value in value
		return value == option.value

	def branches() -> list[DescriptorNode]:
		return [option.related for option in branching if is_selected(option)]  # pyright: ignore[reportReturnType]

	return [descriptor, Computed(branches, name=f"{descriptor.id}.branches")]


def builtin_bindings(binary: Any = None, select: Any = None) -> list[Binding]:
	"""Bindings for the built-in types, around the given component handles."""
	return [
		Binding(type="binary", component=binary, transformer=binary_transformer),
		Binding(
			type=["select", "multiple-select"],
			component=select,
			transformer=select_transformer,
		),
	]
