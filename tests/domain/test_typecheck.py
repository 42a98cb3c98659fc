"""Tests for runtime type compatibility."""

from collections.abc import Callable, Sized
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal,
    NewType,
    Optional,
    Protocol,
    TypeVar,
    Union,
)

import pytest

from objfacade.domain.typecheck import (
    UNTYPED,
    allows_none,
    is_classvar,
    type_accepts,
    type_name,
)

UserId = NewType("UserId", int)
Unbound = TypeVar("Unbound")
BoundToInt = TypeVar("BoundToInt", bound=int)
StrOrBytes = TypeVar("StrOrBytes", str, bytes)


class Greeter(Protocol):
    def greet(self) -> str: ...


class TestAllowsNone:
    @pytest.mark.parametrize(
        "declared",
        [
            UNTYPED,
            Any,
            object,
            None,
            type(None),
            Optional[int],
            int | None,
            Union[str, None],
            Literal[None, 1],
            Annotated[int | None, "meta"],
            "Forward",
            Unbound,
        ],
    )
    def test_nullable(self, declared: Any) -> None:
        assert allows_none(declared)

    @pytest.mark.parametrize(
        "declared",
        [int, str, list[int], Literal["a"], BoundToInt, UserId, Annotated[int, "meta"]],
    )
    def test_not_nullable(self, declared: Any) -> None:
        assert not allows_none(declared)


class TestTypeAccepts:
    def test_plain_classes(self) -> None:
        assert type_accepts(int, 3)
        assert not type_accepts(int, "3")
        assert type_accepts(str, "x")
        assert not type_accepts(str, b"x")

    def test_untyped_and_any_accept_everything(self) -> None:
        assert type_accepts(UNTYPED, object())
        assert type_accepts(Any, 1)
        assert type_accepts(object, "x")

    def test_none_follows_nullability(self) -> None:
        assert not type_accepts(int, None)
        assert type_accepts(int | None, None)
        assert not type_accepts(type(None), 0)

    def test_numeric_promotion(self) -> None:
        assert type_accepts(float, 3)
        assert type_accepts(complex, 1.5)
        assert not type_accepts(float, "1.0")
        assert not type_accepts(int, 1.0)

    def test_unions(self) -> None:
        assert type_accepts(Union[int, str], "a")
        assert type_accepts(int | str, 1)
        assert not type_accepts(int | str, 1.5)

    def test_generics_check_only_the_container(self) -> None:
        assert type_accepts(list[int], [1])
        assert type_accepts(list[int], ["a"])
        assert not type_accepts(list[int], {})
        assert type_accepts(dict[str, int], {})

    def test_literal_matches_value_and_type(self) -> None:
        assert type_accepts(Literal["a", "b"], "a")
        assert not type_accepts(Literal["a", "b"], "c")
        assert type_accepts(Literal[1], 1)
        assert not type_accepts(Literal[1], True)

    def test_type_of(self) -> None:
        assert type_accepts(type[int], bool)
        assert not type_accepts(type[int], str)
        assert not type_accepts(type[int], 3)

    def test_callable(self) -> None:
        assert type_accepts(Callable, len)
        assert type_accepts(Callable[[int], str], str)
        assert not type_accepts(Callable, 3)

    def test_protocols(self) -> None:
        assert type_accepts(Sized, [1])
        assert not type_accepts(Sized, 3)
        # Not runtime-checkable: cannot be decided, so accepted.
        assert type_accepts(Greeter, 3)

    def test_newtype_and_typevars(self) -> None:
        assert type_accepts(UserId, 5)
        assert not type_accepts(UserId, "5")
        assert type_accepts(Unbound, object())
        assert type_accepts(BoundToInt, 1)
        assert not type_accepts(BoundToInt, "1")
        assert type_accepts(StrOrBytes, b"x")
        assert not type_accepts(StrOrBytes, 1)

    def test_wrappers_are_stripped(self) -> None:
        assert type_accepts(ClassVar[int], 3)
        assert not type_accepts(Annotated[int, "meta"], "3")

    def test_unresolved_forward_reference_accepts(self) -> None:
        assert type_accepts("Missing", 5)


class TestHelpers:
    def test_is_classvar(self) -> None:
        assert is_classvar(ClassVar[int])
        assert is_classvar(ClassVar)
        assert is_classvar("ClassVar[int]")
        assert not is_classvar(int)
        assert not is_classvar("int")

    def test_type_name(self) -> None:
        assert type_name(int) == "int"
        assert type_name(UNTYPED) == "-"
        assert type_name(None) == "None"
        assert type_name(type(None)) == "None"
        assert type_name(list[int]) == "list[int]"
        assert type_name("Peer") == "Peer"
