import pytest
from pulse_forms import (
	CircularDependencyError,
	Computed,
	ReactiveWriteError,
	Signal,
	Untrack,
	is_reactive,
)
from pulse_forms.reactive import same_value
from pulse_forms.reactive_extensions import ReactiveDict


def test_signal_creation_and_access():
	s = Signal(10, name="s")
	assert s() == 10


def test_signal_update():
	s = Signal(10, name="s")
	s.write(20)
	assert s() == 20
	assert s.read() == 20


def test_simple_computed():
	s = Signal(10, name="s")
	c = Computed(lambda: s() * 2, name="c")
	assert c() == 20
	s.write(20)
	assert c() == 40


def test_computed_is_memoized():
	s = Signal(1, name="s")
	calls = 0

	def double():
		nonlocal calls
		calls += 1
		return s() * 2

	c = Computed(double, name="double")
	assert c() == 2
	assert c() == 2
	assert calls == 1

	# Writing an equal value is a no-op
	s.write(1)
	assert c() == 2
	assert calls == 1

	s.write(3)
	assert c() == 6
	assert calls == 2


def test_computed_returning_none_is_memoized():
	calls = 0

	def nothing():
		nonlocal calls
		calls += 1
		return None

	c = Computed(nothing)
	assert c() is None
	assert c() is None
	assert calls == 1


def test_computed_chain():
	s = Signal(2, name="s")
	c1 = Computed(lambda: s() * 2, name="c1")
	c2 = Computed(lambda: c1() * 2, name="c2")

	assert c2() == 8

	s.write(3)

	assert c1() == 6
	assert c2() == 12


def test_dynamic_dependencies():
	s1 = Signal(10, name="s1")
	s2 = Signal(20, name="s2")
	toggle = Signal(True, name="toggle")
	calls = 0

	def pick():
		nonlocal calls
		calls += 1
		return s1() if toggle() else s2()

	c = Computed(pick, name="c")
	assert c() == 10

	toggle.write(False)
	assert c() == 20
	assert calls == 2

	# c no longer depends on s1
	s1.write(50)
	assert c() == 20
	assert calls == 2

	s2.write(200)
	assert c() == 200
	assert calls == 3


def test_untrack():
	s1 = Signal(1, name="s1")
	s2 = Signal(10, name="s2")

	def total():
		with Untrack():
			untracked = s2()
		return s1() + untracked

	c = Computed(total, name="total")
	assert c() == 11

	# s2 is not a dependency
	s2.write(20)
	assert c() == 11

	s1.write(2)
	assert c() == 22


def test_circular_dependency():
	c: Computed[int] = Computed(lambda: c() + 1, name="loop")
	with pytest.raises(CircularDependencyError):
		c()
	# Still reported as circular, not left in a broken state
	with pytest.raises(CircularDependencyError):
		c()


def test_error_in_computed_does_not_poison_it():
	fail = Signal(True, name="fail")

	def maybe_fail():
		if fail():
			raise ValueError("boom")
		return "ok"

	c = Computed(maybe_fail, name="maybe_fail")
	with pytest.raises(ValueError):
		c()
	fail.write(False)
	assert c() == "ok"


def test_write_in_computed_is_rejected():
	s = Signal(0, name="s")
	c = Computed(lambda: s.write(1), name="writer")
	with pytest.raises(ReactiveWriteError):
		c()


def test_write_of_equal_value_with_other_type():
	s = Signal(1, name="s")
	c = Computed(lambda: s() is True, name="is_true")
	assert c() is False

	# 1 == True, but it is still a different value
	s.write(True)
	assert s() is True
	assert c() is True

	s.write(0)
	s.write(False)
	assert s() is False


def test_computed_change_detection_is_type_aware():
	s = Signal(1, name="s")
	wrapped = Computed(lambda: {"flag": [s()]}, name="wrapped")
	calls = 0

	def downstream():
		nonlocal calls
		calls += 1
		return wrapped()["flag"][0]

	c = Computed(downstream, name="downstream")
	assert c() == 1

	s.write(True)
	assert c() is True
	assert calls == 2


def test_same_value():
	assert same_value(1, 1)
	assert not same_value(1, True)
	assert not same_value(0.0, 0)
	assert same_value(["a", {"b": 1}], ["a", {"b": 1}])
	assert not same_value({"b": 1}, {"b": True})
	assert not same_value((1,), [1])


def test_is_reactive():
	assert is_reactive(Signal(1))
	assert is_reactive(Computed(lambda: 1))
	assert not is_reactive(1)
	assert not is_reactive([Signal(1)])


def test_reactive_dict_per_key_reactivity():
	d = ReactiveDict({"a": 1, "b": 2})
	calls = 0

	def read_a():
		nonlocal calls
		calls += 1
		return d["a"]

	c = Computed(read_a, name="read_a")
	assert c() == 1

	d["b"] = 3
	assert c() == 1
	assert calls == 1

	d["a"] = 5
	assert c() == 5
	assert calls == 2



def test_reactive_dict_signals_are_shared():
	d = ReactiveDict({"a": 1})
	signals = d.signals()
	assert signals["a"] is d.signal("a")

	signals["a"].write(2)
	assert d["a"] == 2
	assert d.snapshot() == {"a": 2}

	d["a"] = 3
	assert signals["a"]() == 3


def test_reactive_dict_reflects_direct_signal_writes():
	d = ReactiveDict({"x": 1, "y": "a"})
	d.signal("x").write(2)

	assert list(d.items()) == [("x", 2), ("y", "a")]
	assert list(d.values()) == [2, "a"]
	assert d == {"x": 2, "y": "a"}
	assert d != {"x": 1, "y": "a"}
	assert dict(d) == {"x": 2, "y": "a"}


def test_reactive_dict_delete_keeps_signal():
	d = ReactiveDict({"a": 1})
	signal = d.signal("a")
	c = Computed(lambda: d["a"], name="a")
	assert c() == 1

	del d["a"]
	assert c() is None
	assert d.signal("a") is signal
	assert "a" in d


def test_reactive_dict_missing_keys():
	d = ReactiveDict()
	assert d.get("missing", "default") == "default"
	with pytest.raises(KeyError):
		d["missing"]
	with pytest.raises(KeyError):
		del d["missing"]
	assert "missing" not in d

	d.update({"x": 1, "y": 2})
	assert len(d) == 2
	assert d.snapshot() == {"x": 1, "y": 2}
