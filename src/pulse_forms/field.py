from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pulse_forms.models import Descriptor
from pulse_forms.reactive import Signal


def extract_model(descriptor: Descriptor) -> Signal[Any] | None:
	return descriptor.model


def use_descriptor(
	descriptor: Descriptor, allowed_input_bindings: Iterable[str] = ()
) -> tuple[Signal[Any] | None, dict[str, Any]]:
	"""Splits a descriptor into its model and the attributes a renderer may
	forward to the underlying input. Missing attributes are skipped."""
	input_props = {
		name: getattr(descriptor, name)
		for name in allowed_input_bindings
		if hasattr(descriptor, name)
	}
	return descriptor.model, input_props
