import pytest

from remotecache.annotate import AnnotatedError, annotate_error


def test_without_reason_has_prefix_and_error():
    err = ValueError("boom")
    result = annotate_error("read blob", err)
    assert str(result) == "read blob: boom"
    assert result.reason is None


def test_with_reason_appends_it_in_parentheses():
    err = ValueError("boom")
    reason = TimeoutError("deadline exceeded")
    result = annotate_error("read blob", err, reason)
    assert str(result) == "read blob: boom (deadline exceeded)"
    assert result.reason is reason


def test_wrapped_error_is_the_cause():
    err = KeyError("missing")
    result = annotate_error("lookup", err)
    assert result.__cause__ is err
    assert result.error is err
    assert result.prefix == "lookup"


def test_can_be_raised_and_caught():
    err = OSError("disk")
    with pytest.raises(AnnotatedError) as info:
        raise annotate_error("write", err)
    assert info.value.error is err
    assert str(info.value).startswith("write: ")


def test_message_contains_error_text_and_reason_text():
    err = RuntimeError("inner failure")
    reason = RuntimeError("cancelled")
    result = annotate_error("op", err, reason)
    text = str(result)
    assert str(err) in text
    assert text.endswith(f"({reason})")