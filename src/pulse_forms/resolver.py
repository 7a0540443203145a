from __future__ import annotations

from collections.abc import Sequence

from pulse_forms.errors import DescriptorShapeError
from pulse_forms.models import Descriptor, DescriptorNode
from pulse_forms.reactive import is_reactive


def resolve(node: DescriptorNode) -> list[Descriptor]:
	"""
	Flattens a descriptor tree into the ordered list of descriptors currently
	visible.

	Reactive values are unwrapped to their current value (repeatedly, a branch
	may yield another branch), sequences are resolved depth-first and
	concatenated, descriptors are returned as a one-element list. Called within
	a computed, every reactive value traversed becomes a dependency, so the
	whole tree is resolved again whenever one of them changes.
	"""
	while is_reactive(node):
		node = node()  # pyright: ignore[reportCallIssue]

	if isinstance(node, Descriptor):
		return [node]

	# Strings are sequences too, but never valid nodes
	if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
		descriptors: list[Descriptor] = []
		for child in node:
			descriptors.extend(resolve(child))
		return descriptors

	raise DescriptorShapeError(node)
