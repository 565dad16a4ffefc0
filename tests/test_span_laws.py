import random

import pytest

from spans import spans_by_key


def _random_sources() -> list[list[int]]:
    rand = random.Random(20241019)
    sources: list[list[int]] = [[]]
    for length in range(1, 40):
        sources.append([rand.randint(0, 6) for _ in range(length)])
    return sources


_PREDICATES = {
    "equal": lambda a, b: a == b,
    "step": lambda a, b: a + 1 == b,
    "not_decreasing": lambda a, b: a <= b,
    "never": lambda a, b: False,
    "always": lambda a, b: True,
}


def _segment(source: list[int], are_connected) -> list[list[int]]:
    return [list(span) for span in spans_by_key(source, lambda x: x % 5, are_connected)]


@pytest.mark.parametrize("name", sorted(_PREDICATES))
def test_partition_and_adjacency(name: str):
    are_connected = _PREDICATES[name]
    for source in _random_sources():
        segments = _segment(source, are_connected)

        # 拼接所有 span 得到原序列
        assert [item for segment in segments for item in segment] == source
        assert all(len(segment) > 0 for segment in segments)

        for segment in segments:
            for prev, current in zip(segment, segment[1:]):
                assert are_connected(prev % 5, current % 5)

        for segment, following in zip(segments, segments[1:]):
            assert not are_connected(segment[-1] % 5, following[0] % 5)


def test_empty_source_has_no_spans():
    for are_connected in _PREDICATES.values():
        assert _segment([], are_connected) == []


def test_never_connected_gives_singletons():
    source = [3, 3, 3, 1]
    assert _segment(source, _PREDICATES["never"]) == [[3], [3], [3], [1]]


def test_always_connected_gives_one_span():
    source = [4, 0, 2]
    assert _segment(source, _PREDICATES["always"]) == [[4, 0, 2]]
