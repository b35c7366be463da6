import pytest

from bidikit.joining_types import (
    MASK_ARAB_SHAPES,
    MASK_IGNORED,
    MASK_JOINS_LEFT,
    MASK_JOINS_RIGHT,
    MASK_LIGATURED,
    MASK_TRANSPARENT,
    JoiningType,
    arab_shapes,
    char_from_joining_type,
    classify,
    is_join_base_shapes,
    is_join_skipped,
    join_shape,
    joining_type_name,
    joins_following_mask,
    joins_left,
    joins_preceding_mask,
    joins_right,
)


@pytest.mark.parametrize("jt", list(JoiningType))
def test_name_matches_member(jt):
    assert joining_type_name(jt) == jt.name
    assert joining_type_name(int(jt)) == jt.name


def test_name_of_unknown_value():
    assert joining_type_name(MASK_LIGATURED) == "?"


def test_documented_values():
    assert classify(0) is JoiningType.U
    assert joining_type_name(MASK_JOINS_RIGHT | MASK_ARAB_SHAPES) == "R"
    assert classify(MASK_JOINS_RIGHT | MASK_ARAB_SHAPES) is JoiningType.R
    assert joining_type_name(MASK_IGNORED) == "G"
    assert classify(MASK_IGNORED) is JoiningType.G


@pytest.mark.parametrize("jt", list(JoiningType))
def test_classify_round_trip(jt):
    assert classify(jt) is jt


@pytest.mark.parametrize("jt", list(JoiningType))
def test_classify_ignores_ligature_bit(jt):
    assert classify(jt | MASK_LIGATURED) is jt


def test_classify_inconsistent_property():
    assert classify(MASK_TRANSPARENT | MASK_IGNORED) is None
    assert char_from_joining_type(MASK_TRANSPARENT | MASK_IGNORED, False) == "?"


def test_classify_after_unsetting_bits():
    # A dual-joining character that lost its left join behaves as right-joining.
    assert classify(JoiningType.D & ~MASK_JOINS_LEFT) is JoiningType.R
    assert classify(JoiningType.D & ~MASK_JOINS_RIGHT) is JoiningType.L


@pytest.mark.parametrize(
    "jt,symbol",
    [
        (JoiningType.U, "|"),
        (JoiningType.R, "<"),
        (JoiningType.D, "+"),
        (JoiningType.C, "-"),
        (JoiningType.T, "^"),
        (JoiningType.L, ">"),
        (JoiningType.G, "~"),
    ],
)
def test_logical_symbols(jt, symbol):
    assert char_from_joining_type(jt, False) == symbol
    assert jt.symbol == symbol


def test_visual_swaps_one_sided_joins():
    assert char_from_joining_type(JoiningType.R, True) == char_from_joining_type(
        JoiningType.L, False
    )
    assert char_from_joining_type(JoiningType.L, True) == char_from_joining_type(
        JoiningType.R, False
    )


@pytest.mark.parametrize(
    "jt", [JoiningType.U, JoiningType.D, JoiningType.C, JoiningType.T, JoiningType.G]
)
def test_visual_keeps_symmetric_types(jt):
    assert char_from_joining_type(jt, True) == char_from_joining_type(jt, False)


def test_join_queries():
    assert [jt for jt in JoiningType if joins_right(jt)] == [
        JoiningType.R,
        JoiningType.D,
        JoiningType.C,
    ]
    assert [jt for jt in JoiningType if joins_left(jt)] == [
        JoiningType.D,
        JoiningType.C,
        JoiningType.L,
    ]
    assert {jt for jt in JoiningType if arab_shapes(jt)} == {
        JoiningType.R,
        JoiningType.D,
        JoiningType.T,
        JoiningType.L,
    }
    assert {jt for jt in JoiningType if is_join_skipped(jt)} == {
        JoiningType.T,
        JoiningType.G,
    }
    assert {jt for jt in JoiningType if is_join_base_shapes(jt)} == {
        JoiningType.R,
        JoiningType.D,
        JoiningType.L,
    }


@pytest.mark.parametrize("level", [0, 1, 2, 3, 60, 61])
def test_preceding_and_following_masks_are_complementary(level):
    pre = joins_preceding_mask(level)
    fol = joins_following_mask(level)
    assert pre | fol == MASK_JOINS_RIGHT | MASK_JOINS_LEFT
    assert pre & fol == 0


def test_masks_by_direction():
    assert joins_preceding_mask(1) == MASK_JOINS_RIGHT
    assert joins_preceding_mask(0) == MASK_JOINS_LEFT
    assert joins_following_mask(1) == MASK_JOINS_LEFT
    assert joins_following_mask(0) == MASK_JOINS_RIGHT


@pytest.mark.parametrize("jt", list(JoiningType))
def test_join_shape_keeps_only_join_bits(jt):
    shape = join_shape(jt | MASK_LIGATURED)
    assert shape == jt & (MASK_JOINS_RIGHT | MASK_JOINS_LEFT)
    assert joins_right(shape) == joins_right(jt)
    assert joins_left(shape) == joins_left(jt)


@pytest.mark.parametrize("jt", list(JoiningType))
def test_matches_agrees_with_classify(jt):
    matching = [other for other in JoiningType if other.matches(jt)]
    assert matching == [classify(jt)]