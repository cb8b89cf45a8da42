import pytest

from bigkit.errors import CheckError, ensure_not


def test_truthy_condition_raises_with_description():
    with pytest.raises(CheckError, match="Hit An Err Because condition pos >= count"):
        ensure_not(True, "pos >= count")


@pytest.mark.parametrize("condition", [1, "x", [0], 2.5])
def test_truthy_values_raise(condition):
    with pytest.raises(CheckError):
        ensure_not(condition, "cond")


def test_message_attribute_matches_text():
    with pytest.raises(CheckError) as info:
        ensure_not(True, "a < b")
    assert info.value.message == str(info.value)
    assert info.value.message.endswith("a < b")


@pytest.mark.parametrize("condition", [False, 0, "", [], None])
def test_falsy_values_pass_and_later_check_still_raises(condition):
    ensure_not(condition, "never")
    with pytest.raises(CheckError, match="after"):
        ensure_not(not condition, "after")