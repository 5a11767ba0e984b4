from __future__ import annotations

import pytest

from rail_direction.core.errors import StationLookupError
from rail_direction.correction.resolver import should_reverse
from rail_direction.data.features import LineFeature
from rail_direction.data.stations import StationIndex, StationPoint


def _index() -> StationIndex:
    return StationIndex({"A": StationPoint("A", 0.0, 0.0), "B": StationPoint("B", 10.0, 0.0)})


def _line(code1, code2, paths):
    return LineFeature.model_validate(
        {"attributes": {"code1": code1, "code2": code2}, "geometry": {"paths": paths}}
    )


def test_path_starting_at_code1_is_kept() -> None:
    assert should_reverse(_line("A", "B", [[[0, 0], [10, 0]]]), _index()) is False


def test_path_starting_at_code2_is_reversed() -> None:
    assert should_reverse(_line("A", "B", [[[10, 0], [0, 0]]]), _index()) is True


def test_only_first_vertex_of_first_part_counts() -> None:
    line = _line("A", "B", [[[9, 0], [0, 0]], [[0, 0], [1, 0]]])
    assert should_reverse(line, _index()) is True


def test_equidistant_start_is_kept() -> None:
    assert should_reverse(_line("A", "B", [[[5, 0], [0, 0]]]), _index()) is False


def test_tie_from_injected_distance_is_kept() -> None:
    line = _line("A", "B", [[[10, 0], [0, 0]]])
    assert should_reverse(line, _index(), distance=lambda *_: 42.0) is False


def test_vertices_with_z_are_accepted() -> None:
    assert should_reverse(_line("A", "B", [[[9.5, 0.1, 12.0], [0, 0, 3.0]]]), _index()) is True


@pytest.mark.parametrize("code1, code2, missing", [("Z", "B", "Z"), ("A", "Y", "Y"), ("X", "Y", "X")])
def test_unknown_code_raises(code1, code2, missing) -> None:
    with pytest.raises(StationLookupError, match=f"^{missing} not found$"):
        should_reverse(_line(code1, code2, [[[0, 0], [10, 0]]]), _index())
