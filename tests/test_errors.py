import pytest

from sheepit.errors import SheepError


def test_plain_message_is_prefixed():
    assert str(SheepError("boom")) == "😱 boom"


def test_kind_is_folded_into_message():
    error = SheepError("disk full", kind="io")
    assert error.message == "😱 io error: disk full"


def test_equal_messages_compare_equal():
    assert SheepError("same") == SheepError("same")
    assert not SheepError("same") == SheepError("other")


def test_equal_errors_hash_alike():
    assert len({SheepError("x"), SheepError("x")}) == 1


def test_raised_and_caught_as_exception():
    error = SheepError("no url from remote")
    assert error.message == "😱 no url from remote"
    assert error.args == ("😱 no url from remote",)
    with pytest.raises(SheepError, match="no url from remote") as info:
        raise error
    assert info.value == SheepError("no url from remote")


def test_kind_differs_from_plain_message():
    plain = SheepError("bad")
    kinded = SheepError("bad", kind="config parse")
    assert plain.message.startswith("😱 ")
    assert kinded.message.startswith("😱 config parse error: ")
    assert plain.message.removeprefix("😱 ") in kinded.message