"""Custom error types for pulse-forms."""

from __future__ import annotations

from typing import Any


class FormsError(Exception):
	"""Base error for all pulse-forms errors."""


class BindingLookupError(FormsError, LookupError):
	"""Raised when no binding has been registered for a descriptor type."""

	def __init__(self, descriptor_type: str):
		self.descriptor_type = descriptor_type
		super().__init__(
			f"No bindings has been provided for descriptor type {descriptor_type!r}"
		)


class DescriptorShapeError(FormsError, TypeError):
	"""Raised when a descriptor tree contains something that is not a node."""

	def __init__(self, value: Any):
		self.value = value
		super().__init__(
			"Descriptor trees may only contain descriptors, sequences and reactive "
			f"values, got {type(value).__name__}: {value!r}"
		)


class CircularDependencyError(FormsError, RuntimeError):
	def __init__(self, name: str | None = None):
		msg = "Circular dependency detected"
		if name:
			msg += f" in computed {name!r}"
		super().__init__(msg)


class ReactiveWriteError(FormsError, RuntimeError):
	"""Raised when a computed writes to a signal while evaluating."""

	def __init__(self, name: str | None = None):
		super().__init__(
			f"Detected write to a signal in computed {name}. Computeds should be read-only."
		)
