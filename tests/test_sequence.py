import inspect

from smoke.sequence import drain, values


def test_values_is_lazy():
    gen = values()
    assert inspect.isgenerator(gen)
    # nothing is computed until the first pull
    assert inspect.getgeneratorstate(gen) == inspect.GEN_CREATED


def test_values_yields_single_shifted_value():
    assert list(values()) == [32]


def test_second_drain_yields_nothing():
    gen = values()
    assert list(gen) == [32]
    assert list(gen) == []
    assert next(gen, None) is None


def test_drain_counts_and_exhausts():
    gen = values()
    assert drain(gen) == 1
    assert drain(gen) == 0
    assert inspect.getgeneratorstate(gen) == inspect.GEN_CLOSED


def test_drain_accepts_any_iterable():
    assert drain([]) == 0
    assert drain(range(5)) == 5
