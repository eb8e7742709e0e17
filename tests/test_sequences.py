#
# Utilbelt - Sequences Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from utilbelt.collections import OrderedSet
from utilbelt.errors import InvalidSelectorError, MissingSelectorError
from utilbelt.sequences import (
    average,
    chunk,
    compact,
    count_by,
    enumerated,
    first,
    group_by,
    last,
    num_range,
    repeat,
    shuffle,
    sort_asc,
    sort_desc,
    sum_by,
    swap,
    to_map,
    to_set,
    unique,
    zip_all,
)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class User:
    name: str
    age: int


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFirstLast:
    def test_non_empty(self):
        assert first([1, 2, 3]) == 1
        assert last([1, 2, 3]) == 3

    def test_empty(self):
        assert first([]) is None
        assert last([]) is None

    def test_tuple_and_str(self):
        assert first((4, 5)) == 4
        assert last("abc") == "c"


class TestSumAverage:
    @pytest.mark.parametrize(
        "seq, selector, expected",
        [
            pytest.param([1, 2, 3], None, 6, id="plain"),
            pytest.param([], None, 0, id="empty"),
            pytest.param([1.5, 2.5], None, 4.0, id="floats"),
            pytest.param([{"x": 1}, {"x": 2}], "x", 3, id="field-name"),
            pytest.param(["a", "bb", "ccc"], len, 6, id="function"),
            pytest.param([10, 20], lambda item, index: index, 1, id="function-with-index"),
        ],
    )
    def test_sum_by(self, seq, selector, expected):
        assert sum_by(seq, selector) == expected

    def test_sum_by_builtin_with_optional_argument(self):
        assert sum_by([1.4, 2.6, 3.5], round) == 8

    def test_sum_by_objects(self):
        users = [User("a", 20), User("b", 30)]
        assert sum_by(users, "age") == 50

    @pytest.mark.parametrize(
        "seq",
        [
            pytest.param(["a", "b"], id="strings"),
            pytest.param([1, None], id="none"),
            pytest.param([True, 1], id="bool"),
        ],
    )
    def test_sum_by_non_numbers(self, seq):
        with pytest.raises(TypeError, match="sum_by requires numbers"):
            sum_by(seq)

    def test_sum_by_missing_field(self):
        with pytest.raises(TypeError, match="requires numbers"):
            sum_by([{"x": 1}, {"y": 2}], "x")

    def test_sum_by_invalid_selector(self):
        with pytest.raises(InvalidSelectorError):
            sum_by([1, 2], 42)

    def test_average(self):
        assert average([2, 4, 6]) == 4
        assert average([{"v": 1}, {"v": 2}], "v") == 1.5

    def test_average_empty(self):
        assert average([]) == 0
        assert average([], "v") == 0

    def test_average_non_numbers(self):
        with pytest.raises(TypeError, match="average requires numbers"):
            average(["x"])


class TestUnique:
    @pytest.mark.parametrize(
        "seq, expected",
        [
            pytest.param([1, 2, 2, 3, 1], [1, 2, 3], id="ints"),
            pytest.param([3, 1, 3, 2], [3, 1, 2], id="first-seen-order"),
            pytest.param(["b", "a", "b"], ["b", "a"], id="strings"),
            pytest.param([], [], id="empty"),
            pytest.param([None, None, 0], [None, 0], id="none"),
            pytest.param([1, 1.0, 2], [1, 2], id="int-float"),
        ],
    )
    def test_hashable(self, seq, expected):
        assert unique(seq) == expected

    def test_bools_kept_apart_from_numbers(self):
        result = unique([1, True, 0, False, True, 0])
        assert result == [1, True, 0, False]
        assert [type(item) for item in result] == [int, bool, int, bool]

    def test_unhashable_by_identity(self):
        shared = {"a": 1}
        seq = [shared, shared, {"a": 1}]
        result = unique(seq)
        assert len(result) == 2
        assert result[0] is shared
        assert result[1] is seq[2]

    def test_input_untouched(self):
        seq = [1, 1]
        unique(seq)
        assert seq == [1, 1]


class TestChunk:
    @pytest.mark.parametrize(
        "seq, size, expected",
        [
            pytest.param([1, 2, 3], 2, [[1, 2], [3]], id="last-shorter"),
            pytest.param([1, 2, 3, 4], 2, [[1, 2], [3, 4]], id="even"),
            pytest.param([1, 2], 5, [[1, 2]], id="size-larger"),
            pytest.param([], 3, [], id="empty"),
            pytest.param((1, 2, 3), 1, [[1], [2], [3]], id="tuple"),
        ],
    )
    def test_chunk(self, seq, size, expected):
        assert chunk(seq, size) == expected

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        with pytest.raises(ValueError, match="chunk size must be >= 1"):
            chunk([1, 2], size)

    @pytest.mark.parametrize("size", [1.5, "2", None, True])
    def test_non_int_size(self, size):
        with pytest.raises(TypeError, match="chunk size must be an integer"):
            chunk([1, 2], size)


class TestGroupCount:
    def test_group_by_function(self):
        assert group_by(["a", "ab", "b"], len) == {1: ["a", "b"], 2: ["ab"]}

    def test_group_by_field(self):
        users = [User("a", 20), User("b", 30), User("c", 20)]
        groups = group_by(users, "age")
        assert list(groups) == [20, 30]
        assert [u.name for u in groups[20]] == ["a", "c"]

    def test_group_by_empty(self):
        assert group_by([], len) == {}

    def test_group_by_requires_selector(self):
        with pytest.raises(MissingSelectorError, match="group_by selector is required"):
            group_by([1, 2], None)

    def test_group_by_unhashable_key(self):
        with pytest.raises(TypeError, match="group_by key must be hashable"):
            group_by([1], lambda item: [item])

    def test_count_by_element(self):
        assert count_by(["a", "b", "a"]) == {"a": 2, "b": 1}

    def test_count_by_selector(self):
        assert count_by([1, 2, 3, 4, 5], lambda n: n % 2) == {1: 3, 0: 2}
        assert count_by([{"t": "x"}, {"t": "y"}, {"t": "x"}], "t") == {"x": 2, "y": 1}


class TestToMapToSet:
    def test_to_map_defaults(self):
        assert to_map(["a", "b"]) == {0: "a", 1: "b"}

    def test_to_map_key_and_value(self):
        rows = [{"id": 7, "name": "x"}, {"id": 8, "name": "y"}]
        assert to_map(rows, key="id", value="name") == {7: "x", 8: "y"}

    def test_to_map_key_only(self):
        rows = [{"id": 1}, {"id": 2}]
        result = to_map(rows, key="id")
        assert result[1] is rows[0]

    def test_to_map_last_value_wins(self):
        assert to_map(["a", "bb", "c"], key=len) == {1: "c", 2: "bb"}

    def test_to_map_value_with_index(self):
        assert to_map(["a", "b"], key=str.upper, value=lambda item, index: index) == {"A": 0, "B": 1}

    def test_to_set(self):
        result = to_set([3, 1, 3, 2])
        assert isinstance(result, OrderedSet)
        assert result.to_list() == [3, 1, 2]

    def test_to_set_selector(self):
        assert to_set([{"t": "x"}, {"t": "y"}, {"t": "x"}], "t").to_list() == ["x", "y"]


class TestSort:
    def test_numbers(self):
        assert sort_asc([3, 1, 2]) == [1, 2, 3]
        assert sort_desc([3, 1, 2]) == [3, 2, 1]

    def test_strings(self):
        assert sort_asc(["b", "c", "a"]) == ["a", "b", "c"]
        assert sort_desc(["b", "c", "a"]) == ["c", "b", "a"]

    def test_mixed_int_float(self):
        assert sort_asc([2.5, 1, 2]) == [1, 2, 2.5]

    def test_selector(self):
        users = [User("a", 30), User("b", 20)]
        assert [u.name for u in sort_asc(users, "age")] == ["b", "a"]
        assert [u.name for u in sort_desc(users, lambda u: u.age)] == ["a", "b"]

    def test_stable_for_equal_keys(self):
        rows = [{"k": 1, "n": "a"}, {"k": 0, "n": "b"}, {"k": 1, "n": "c"}, {"k": 0, "n": "d"}]
        assert [r["n"] for r in sort_asc(rows, "k")] == ["b", "d", "a", "c"]
        assert [r["n"] for r in sort_desc(rows, "k")] == ["a", "c", "b", "d"]

    def test_input_untouched(self):
        seq = [3, 1, 2]
        sort_asc(seq)
        assert seq == [3, 1, 2]

    def test_empty(self):
        assert sort_asc([]) == []

    def test_mixed_numbers_and_strings(self):
        with pytest.raises(TypeError, match="not a mix of both"):
            sort_asc([1, "a"])

    @pytest.mark.parametrize(
        "seq",
        [
            pytest.param([1, None], id="none"),
            pytest.param([[1], [0]], id="lists"),
            pytest.param([True, False], id="bools"),
        ],
    )
    def test_invalid_keys(self, seq):
        with pytest.raises(TypeError, match="sort keys must be numbers or strings"):
            sort_desc(seq)


class TestSwap:
    def test_swap(self):
        seq = [1, 2, 3]
        result = swap(seq, 0, 2)
        assert result is seq
        assert seq == [3, 2, 1]

    def test_same_index(self):
        assert swap([1, 2], 1, 1) == [1, 2]

    @pytest.mark.parametrize(
        "i, j",
        [
            pytest.param(0, 3, id="past-end"),
            pytest.param(-1, 0, id="negative"),
        ],
    )
    def test_out_of_range(self, i, j):
        with pytest.raises(IndexError, match="out of range"):
            swap([1, 2, 3], i, j)

    def test_non_int_index(self):
        with pytest.raises(TypeError, match="i must be an integer"):
            swap([1, 2], "0", 1)

    def test_immutable_sequence(self):
        with pytest.raises(TypeError, match="mutable sequence"):
            swap((1, 2), 0, 1)


class TestShuffle:
    def test_same_elements(self):
        seq = list(range(20))
        result = shuffle(seq)
        assert sorted(result) == seq
        assert result is not seq

    def test_seed_is_deterministic(self):
        assert shuffle(range(50), seed=7) == shuffle(range(50), seed=7)

    def test_input_untouched(self):
        seq = [1, 2, 3, 4]
        shuffle(seq, seed=1)
        assert seq == [1, 2, 3, 4]

    def test_empty_and_single(self):
        assert shuffle([]) == []
        assert shuffle(["x"]) == ["x"]


class TestCompactEnumerated:
    def test_compact(self):
        assert compact([0, 1, None, "", "a", False, [], {}, 2.5]) == [1, "a", 2.5]

    def test_enumerated(self):
        assert enumerated(["a", "b"]) == [("a", 0), ("b", 1)]
        assert enumerated([]) == []


class TestConstructors:
    @pytest.mark.parametrize(
        "args, expected",
        [
            pytest.param((5,), [0, 1, 2, 3, 4], id="end-only"),
            pytest.param((1, 4), [1, 2, 3], id="start-end"),
            pytest.param((0, 10, 3), [0, 3, 6, 9], id="step"),
            pytest.param((5, 1, -1), [5, 4, 3, 2], id="negative-step"),
            pytest.param((0, 1, 0.25), [0, 0.25, 0.5, 0.75], id="float-step"),
            pytest.param((3, 3), [], id="empty"),
            pytest.param((5, 1), [], id="wrong-direction"),
        ],
    )
    def test_num_range(self, args, expected):
        assert num_range(*args) == expected

    def test_num_range_zero_step(self):
        with pytest.raises(ValueError, match="step must not be 0"):
            num_range(0, 5, 0)

    def test_num_range_non_number(self):
        with pytest.raises(TypeError, match="end must be a number"):
            num_range(0, "5")

    def test_repeat(self):
        assert repeat(3, "a") == ["a", "a", "a"]
        assert repeat(0, "a") == []

    def test_repeat_factory(self):
        result = repeat(2, list)
        assert result == [[], []]
        assert result[0] is not result[1]

    def test_repeat_negative(self):
        with pytest.raises(ValueError, match="repeat length must be >= 0"):
            repeat(-1, 0)

    def test_zip_all(self):
        assert zip_all([1, 2], ["a"]) == [[1, "a"], [2, None]]
        assert zip_all([1], ["a", "b"], [True]) == [[1, "a", True], [None, "b", None]]

    def test_zip_all_empty(self):
        assert zip_all() == []
        assert zip_all([], []) == []


class TestBuiltinSelectors:
    def test_to_set_strip(self):
        assert to_set([" a", "b ", "a"], str.strip).to_list() == ["a", "b"]

    def test_sort_asc_strip(self):
        assert sort_asc([" b", "a"], str.strip) == ["a", " b"]

    def test_group_by_round(self):
        assert group_by([1.2, 0.9, 2.1], round) == {1: [1.2, 0.9], 2: [2.1]}

    def test_count_by_strip(self):
        assert count_by([" a", "a ", "b"], str.strip) == {"a": 2, "b": 1}
