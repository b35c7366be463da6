import pytest

from bidikit.joining import join_arabic
from bidikit.joining_types import JoiningType, join_shape, joins_left, joins_right
from bidikit.types import BidiType

AL = BidiType.AL


def test_empty_input_gives_empty_result():
    assert join_arabic([], [], []) == []


def test_three_dual_joiners_in_rtl_run():
    props = [JoiningType.D] * 3
    result = join_arabic([AL] * 3, [1] * 3, props)
    assert result == [JoiningType.L, JoiningType.D, JoiningType.R]


def test_ltr_result_mirrors_rtl_result():
    props = [JoiningType.D] * 3
    rtl = join_arabic([AL] * 3, [1] * 3, props)
    ltr = join_arabic([BidiType.LTR] * 3, [0] * 3, props)
    assert ltr == list(reversed(rtl))


def test_non_joining_character_breaks_joining():
    props = [JoiningType.D, JoiningType.U, JoiningType.D]
    result = join_arabic([AL] * 3, [1] * 3, props)
    assert all(join_shape(p) == 0 for p in result)


def test_level_change_breaks_joining():
    props = [JoiningType.D, JoiningType.D]
    result = join_arabic([AL, AL], [1, 3], props)
    assert all(join_shape(p) == 0 for p in result)


def test_transparent_between_joiners_gets_both_join_bits():
    props = [JoiningType.D, JoiningType.T, JoiningType.D]
    result = join_arabic([AL, BidiType.NSM, AL], [1] * 3, props)
    assert joins_right(result[1]) and joins_left(result[1])
    assert result[0] == join_arabic([AL, AL], [1, 1], [JoiningType.D] * 2)[0]


def test_explicit_character_level_matches_anything():
    props = [JoiningType.D, JoiningType.T, JoiningType.D]
    with_bn = join_arabic([AL, BidiType.BN, AL], [1, 0, 1], props)
    plain = join_arabic([AL, BidiType.NSM, AL], [1, 1, 1], props)
    assert with_bn == plain


def test_input_is_not_modified():
    props = [JoiningType.D, JoiningType.D]
    join_arabic([AL, AL], [1, 1], props)
    assert props == [JoiningType.D, JoiningType.D]


def test_accepts_integer_bidi_types():
    props = [JoiningType.D] * 3
    assert join_arabic([AL.value] * 3, [1] * 3, props) == join_arabic([AL] * 3, [1] * 3, props)


def test_single_dual_joiner_becomes_isolated():
    result = join_arabic([AL], [1], [JoiningType.D])
    assert join_shape(result[0]) == 0


@pytest.mark.parametrize(
    "types, levels, props",
    [
        ([AL, AL], [1], [JoiningType.D, JoiningType.D]),
        ([AL], [1, 1], [JoiningType.D, JoiningType.D]),
    ],
)
def test_length_mismatch_raises(types, levels, props):
    with pytest.raises(ValueError):
        join_arabic(types, levels, props)