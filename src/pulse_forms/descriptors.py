from __future__ import annotations

import copy
import itertools
import logging
from collections.abc import Callable
from typing import Any

from pulse_forms.models import Descriptor, DescriptorNode
from pulse_forms.reactive import Computed
from pulse_forms.registry import BINDING_REGISTRY, BindingRegistry

logger = logging.getLogger(__name__)

# Every descriptor needs a unique id so renderers don't re-use components
# between different fields. Never reset.
_descriptor_counter = itertools.count()


def next_descriptor_id() -> str:
	return f"descriptor-{next(_descriptor_counter)}"


def create_conditional(
	condition_fn: Callable[[], Any],
	positive: DescriptorNode,
	negative: DescriptorNode = (),
) -> Computed[DescriptorNode]:
	"""
	Conditionally displays a descriptor or a list of descriptors.

	Only needed when the condition depends on the model of two or more
	other fields, built-in transformers already cover branches keyed on a
	field's own value. The condition may read any number of signals.
	"""
	return Computed(
		lambda: positive if condition_fn() else negative,
		name="conditional",
	)


def create_descriptor(
	config: Descriptor, registry: BindingRegistry | None = None
) -> DescriptorNode:
	"""
	Assigns a unique id to a descriptor configuration and expands it through
	the transformer registered for its type, if any.

	Raises `BindingLookupError` if the type has no registered binding.
	"""
	descriptor = copy.copy(config)
	descriptor.id = next_descriptor_id()

	if registry is None:
		registry = BINDING_REGISTRY.get()
	transformer = registry.lookup(descriptor.type).transformer

	logger.debug("Created %s of type %r", descriptor.id, descriptor.type)
	return transformer(descriptor) if transformer else descriptor
