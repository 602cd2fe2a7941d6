from starlette.requests import ClientDisconnect

from src.api.middleware.faults import describe_fault, is_abort_sentinel, normalize_fault
from src.core.errors import Panic


def test_exception_is_used_as_is():
    exc = ValueError("lorem ipsum")

    assert normalize_fault(exc) is exc


def test_single_member_group_is_unwrapped():
    inner = RuntimeError("lorem ipsum")
    group = ExceptionGroup("task group", [inner])

    assert normalize_fault(group) is inner


def test_nested_single_member_groups_are_unwrapped():
    inner = RuntimeError("lorem ipsum")
    group = ExceptionGroup("outer", [ExceptionGroup("inner", [inner])])

    assert normalize_fault(group) is inner


def test_multi_member_group_is_kept():
    group = ExceptionGroup("task group", [ValueError("a"), KeyError("b")])

    assert normalize_fault(group) is group


def test_non_exception_value_is_wrapped():
    error = normalize_fault("lorem ipsum")

    assert isinstance(error, Panic)
    assert error.value == "lorem ipsum"
    assert str(error) == "lorem ipsum"


def test_non_string_value_uses_text_form():
    error = normalize_fault(42)

    assert isinstance(error, Panic)
    assert str(error) == "42"


def test_describe_fault_prefers_message():
    assert describe_fault(RuntimeError("lorem ipsum")) == "lorem ipsum"


def test_describe_fault_falls_back_to_repr():
    assert describe_fault(KeyboardInterrupt()) == "KeyboardInterrupt()"
    assert describe_fault(ValueError()) == "ValueError()"


def test_abort_sentinel_detection():
    assert is_abort_sentinel(ClientDisconnect())
    assert not is_abort_sentinel(RuntimeError("lorem ipsum"))
    assert not is_abort_sentinel(ConnectionResetError())
