import pytest

from argtree.value import SetBehavior


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("first", SetBehavior.FIRST),
        ("LAST", SetBehavior.LAST),
        (" Multi ", SetBehavior.MULTI),
        ("keep_first", SetBehavior.FIRST),
        ("overwrite", SetBehavior.LAST),
        ("append", SetBehavior.MULTI),
    ],
)
def test_set_behavior_coercion(raw, expected):
    assert SetBehavior(raw) is expected


def test_set_behavior_invalid():
    with pytest.raises(ValueError):
        SetBehavior("sometimes")
    with pytest.raises(ValueError):
        SetBehavior(3)


def test_set_behavior_members_are_returned_unchanged():
    assert SetBehavior(SetBehavior.MULTI) is SetBehavior.MULTI
    assert [behavior.value for behavior in SetBehavior] == ["first", "last", "multi"]
