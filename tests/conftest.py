import pytest
from pulse_forms.models import Binding
from pulse_forms.registry import BindingRegistry
from pulse_forms.transformers import builtin_bindings


@pytest.fixture(autouse=True)
def registry():
	with BindingRegistry(
		[*builtin_bindings("BinaryInput", "SelectInput"), Binding("text", "TextInput")]
	) as registry:
		yield registry
