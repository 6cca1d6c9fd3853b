import pytest

from sheepit.token import VERSION, TokenTrimmer, token_trimmer


def test_new_empty_text():
    assert token_trimmer("", "$token") is None


def test_new_empty_token():
    assert token_trimmer(" text ", "") is None


def test_new_no_token_found():
    assert token_trimmer("my string", "$token") is None


def test_new_token_at_start():
    assert token_trimmer("$token suffix", "$token") == TokenTrimmer("", " suffix")


def test_new_token_at_end():
    assert token_trimmer("prefix $token", "$token") == TokenTrimmer("prefix ", "")


def test_new_token_in_middle():
    assert token_trimmer("prefix $token suffix", "$token") == TokenTrimmer(
        "prefix ", " suffix"
    )


def test_new_only_token():
    assert token_trimmer("$token", "$token") is None


@pytest.mark.parametrize(
    ("pattern", "text", "expected"),
    [
        ("prefix_$token_suffix", "prefix_1.0.0_suffix", "1.0.0"),
        ("prefix_$token", "prefix_1.0.0_suffix", "1.0.0_suffix"),
        ("prefix_$token", "prefix_1.0.0", "1.0.0"),
        ("$token_suffix", "prefix_1.0.0_suffix", "prefix_1.0.0"),
        ("$token_suffix", "1.0.0_suffix", "1.0.0"),
    ],
)
def test_trim_text(pattern, text, expected):
    trimmer = token_trimmer(pattern, "$token")
    assert trimmer is not None
    assert trimmer.trim_text(text) == expected


def test_version_token_pattern():
    trimmer = token_trimmer("v" + VERSION, VERSION)
    assert trimmer == TokenTrimmer("v", "")
    assert trimmer.trim_text("v2.0.0") == "2.0.0"