import pytest

from swiftjobs.services.analysis.parsing import extract_json_object, coerce_score


def test_extract_json_object_from_fenced_reply():
    reply = 'Here is the analysis:\n```json\n{"score": 91, "breakdown": "Strong fit"}\n```\nThanks!'

    assert extract_json_object(reply) == {"score": 91, "breakdown": "Strong fit"}


def test_extract_json_object_keeps_nested_objects():
    reply = '{"a": {"b": [1, 2]}, "c": "d"}'

    assert extract_json_object(reply) == {"a": {"b": [1, 2]}, "c": "d"}


@pytest.mark.parametrize("reply", [
    None,
    "",
    "I cannot score this candidate.",
    "{score: 85, breakdown: unquoted}",
    "Two objects {\"a\": 1} and {\"b\": 2}",
])
def test_extract_json_object_returns_none_when_unparseable(reply):
    assert extract_json_object(reply) is None


def test_extract_json_object_ignores_non_object_json():
    assert extract_json_object("[1, 2, 3]") is None


@pytest.mark.parametrize("value,expected", [
    (85, 85),
    (85.6, 86),
    ("85", 85),
    ("85%", 85),
    ("Score: 72 out of 100", 72),
    (140, 100),
    (-5, 0),
    (0, 0),
    (10 ** 400, 100),
    (-(10 ** 400), 0),
])
def test_coerce_score(value, expected):
    assert coerce_score(value, default=70) == expected


@pytest.mark.parametrize("value", [None, True, "high", [], {}, float("nan"), float("inf"), "9" * 400])
def test_coerce_score_falls_back_to_default(value):
    assert coerce_score(value, default=70) == 70
