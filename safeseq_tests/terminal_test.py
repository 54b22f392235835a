import numpy as np
import pandas as pd

import suite
from safeseq import S, of, empty, from_range, from_iterable, Sequence

test = suite.test
assert_that = suite.assert_that


# factories

@test("from_iterable snapshots its source")
def test_from_iterable_snapshot():
    source = [1, 2, 3]
    seq = from_iterable(source)
    source.append(4)
    assert_that(seq.to.list() == [1, 2, 3], "later changes to the list must not leak in")


@test("from_iterable consumes generators once")
def test_from_iterable_generator():
    seq = from_iterable(x * 2 for x in range(3))
    assert_that(seq.to.list() == [0, 2, 4], "first read")
    assert_that(seq.to.list() == [0, 2, 4], "second read gives the same data")


@test("from_iterable iterates strings by character")
def test_from_iterable_string():
    assert_that(S('abc').to.list() == ['a', 'b', 'c'], "characters expected")


@test("of keeps nested lists as single elements")
def test_of_no_flatten():
    assert_that(of([1, 2], 3).to.list() == [[1, 2], 3], "of does not flatten")


@test("from_range counts up from start")
def test_from_range():
    assert_that(from_range(5, 3).to.list() == [5, 6, 7], "three values from 5")
    assert_that(len(from_range(0, 0)) == 0, "zero count is empty")


@test("empty has no elements")
def test_empty():
    assert_that(len(empty()) == 0 and empty().to.list() == [], "empty is empty")


# sequence protocol

@test("sequence supports len, iteration and plain indexing")
def test_sequence_protocol():
    seq = of('x', 'y')
    assert_that(len(seq) == 2, "length 2")
    assert_that(list(seq) == ['x', 'y'], "iterates in order")
    assert_that(seq[1] == 'y', "plain indexing")


@test("slicing with brackets returns a sequence")
def test_bracket_slice():
    part = from_range(0, 5)[1:3]
    assert_that(isinstance(part, Sequence), "should be a Sequence")
    assert_that(part.to.list() == [1, 2], f"got {part.to.list()}")


@test("sequence has no mutating methods")
def test_no_mutation_api():
    seq = of(1)
    for name in ('append', 'extend', 'insert', 'pop', 'remove', 'sort', '__setitem__', '__delitem__'):
        assert_that(not hasattr(seq, name), f"{name} should not exist")


@test("equality is by reference")
def test_reference_equality():
    assert_that(of(1) != of(1), "distinct sequences are not equal")
    seq = of(1)
    assert_that(seq == seq, "a sequence equals itself")


@test("repr lists the elements")
def test_repr():
    assert_that(repr(of(1, 'a')) == "Sequence([1, 'a'])", f"got {of(1, 'a')!r}")


# to accessor

@test("to.list returns a fresh list each time")
def test_to_list_fresh():
    seq = of(1, 2)
    first = seq.to.list()
    first.append(3)
    assert_that(seq.to.list() == [1, 2], "mutating the returned list must not affect the sequence")


@test("to.tuple returns the elements as a tuple")
def test_to_tuple():
    assert_that(of(1, 2).to.tuple() == (1, 2), "tuple expected")


@test("to.array converts to numpy")
def test_to_array():
    arr = from_range(1, 4).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be an ndarray")
    assert_that(arr.sum() == 10, "1 + 2 + 3 + 4")


@test("to.pandas converts to a series")
def test_to_pandas():
    series = of(3, 1, 2).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a Series")
    assert_that(series.tolist() == [3, 1, 2], "order kept")


@test("to.df converts records to a dataframe")
def test_to_df():
    frame = of({'a': 1, 'b': 2}, {'a': 3, 'b': 4}).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a DataFrame")
    assert_that(list(frame.columns) == ['a', 'b'] and len(frame) == 2, "two rows, two columns")


@test("to.count with and without a predicate")
def test_to_count():
    seq = from_range(1, 10)
    assert_that(seq.to.count() == 10, "ten elements")
    assert_that(seq.to.count(lambda x: x % 3 == 0) == 3, "3, 6, 9")


if __name__ == "__main__":
    suite.main(title="safeseq terminal and factory test suite")
