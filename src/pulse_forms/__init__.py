# Imports are written as `from pulse_forms.foo import X as X` so static
# analyzers treat them as the public API, and target the module where each
# symbol is defined.

from pulse_forms.descriptors import (
	create_conditional as create_conditional,
)
from pulse_forms.descriptors import (
	create_descriptor as create_descriptor,
)
from pulse_forms.errors import (
	BindingLookupError as BindingLookupError,
)
from pulse_forms.errors import (
	CircularDependencyError as CircularDependencyError,
)
from pulse_forms.errors import (
	DescriptorShapeError as DescriptorShapeError,
)
from pulse_forms.errors import (
	FormsError as FormsError,
)
from pulse_forms.errors import (
	ReactiveWriteError as ReactiveWriteError,
)
from pulse_forms.field import (
	extract_model as extract_model,
)
from pulse_forms.field import (
	use_descriptor as use_descriptor,
)
from pulse_forms.form import (
	Form as Form,
)
from pulse_forms.form import (
	use_form as use_form,
)
from pulse_forms.models import (
	Binding as Binding,
)
from pulse_forms.models import (
	Descriptor as Descriptor,
)
from pulse_forms.models import (
	DescriptorNode as DescriptorNode,
)
from pulse_forms.models import (
	SimpleDescriptor as SimpleDescriptor,
)
from pulse_forms.models import (
	Transformer as Transformer,
)
from pulse_forms.reactive import (
	Computed as Computed,
)
from pulse_forms.reactive import (
	Signal as Signal,
)
from pulse_forms.reactive import (
	Untrack as Untrack,
)
from pulse_forms.reactive import (
	is_reactive as is_reactive,
)
from pulse_forms.reactive_extensions import (
	ReactiveDict as ReactiveDict,
)
from pulse_forms.registry import (
	BindingRegistry as BindingRegistry,
)
from pulse_forms.registry import (
	get_binding as get_binding,
)
from pulse_forms.registry import (
	install as install,
)
from pulse_forms.registry import (
	register_descriptor as register_descriptor,
)
from pulse_forms.registry import (
	register_descriptors as register_descriptors,
)
from pulse_forms.resolver import (
	resolve as resolve,
)
from pulse_forms.transformers import (
	BinaryDescriptor as BinaryDescriptor,
)
from pulse_forms.transformers import (
	MultipleSelectDescriptor as MultipleSelectDescriptor,
)
from pulse_forms.transformers import (
	SelectDescriptor as SelectDescriptor,
)
from pulse_forms.transformers import (
	SelectOption as SelectOption,
)
from pulse_forms.transformers import (
	binary_transformer as binary_transformer,
)
from pulse_forms.transformers import (
	builtin_bindings as builtin_bindings,
)
from pulse_forms.transformers import (
	select_transformer as select_transformer,
)
from pulse_forms.version import (
	__version__ as __version__,
)
