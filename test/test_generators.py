from show_format.generators import iter_pairs, slice_between


ITEMS = [11, 22, 33, 44, 55, 66, 77, 88, 99]


def test_iter_pairs():
    assert list(iter_pairs(ITEMS)) == [
        (11, 22),
        (22, 33),
        (33, 44),
        (44, 55),
        (55, 66),
        (66, 77),
        (77, 88),
        (88, 99),
    ]


def test_iter_pairs_short_inputs():
    assert list(iter_pairs([])) == []
    assert list(iter_pairs(["x"])) == []
    assert list(iter_pairs("abc")) == [("a", "b"), ("b", "c")]


def test_iter_pairs_with_none_items():
    assert list(iter_pairs([None, 1, None])) == [(None, 1), (1, None)]


def test_iter_pairs_is_lazy():
    def items():
        yield 1
        yield 2
        raise AssertionError("iterated too far")

    pairs = iter_pairs(items())
    assert next(pairs) == (1, 2)


def test_slice_between():
    start_evaluated, stop_evaluated = [], []

    def start(value):
        start_evaluated.append(value)
        return value > 30

    def stop(value):
        stop_evaluated.append(value)
        return value > 70

    assert list(slice_between(ITEMS, start, stop)) == [33, 44, 55, 66]
    assert start_evaluated == [11, 22, 33]
    assert stop_evaluated == [33, 44, 55, 66, 77]


def test_slice_between_with_same_predicate():
    start_evaluated, stop_evaluated = [], []

    def start(value):
        start_evaluated.append(value)
        return value > 30

    def stop(value):
        stop_evaluated.append(value)
        return value > 30

    assert list(slice_between(ITEMS, start, stop)) == []
    assert start_evaluated == [11, 22, 33]
    assert stop_evaluated == [33]


def test_slice_between_without_match():
    assert list(slice_between(ITEMS, lambda v: v > 100, lambda v: False)) == []
    assert list(slice_between(ITEMS, lambda v: v > 80, lambda v: False)) == [88, 99]
    assert list(slice_between([], lambda v: True, lambda v: False)) == []
