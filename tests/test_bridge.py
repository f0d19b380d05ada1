"""Tests for MemberAccessBridge and the MemberAccess protocol."""

from __future__ import annotations

from typing import Any

import pytest

from extra_asserts.bridge import MemberAccessBridge
from extra_asserts.exceptions import NotObjectError
from extra_asserts.protocols import MemberAccess


class Vault:
    _LIMIT = 3
    __MASTER = "m4ster"

    def __init__(self, secret: str = "s3cr3t") -> None:
        self.__secret = secret
        self._attempts = 0

    def _unlock(self, code: str) -> bool:
        self._attempts += 1
        return code == self.__secret

    def __rotate(self, new: str) -> None:
        self.__secret = new

    @classmethod
    def _limit(cls) -> int:
        return cls._LIMIT

    @staticmethod
    def _hash(value: str, salt: str = "") -> str:
        return f"{salt}{value[::-1]}"


class SubVault(Vault):
    pass


@pytest.fixture
def bridge() -> MemberAccessBridge:
    return MemberAccessBridge()


class TestProtocol:
    def test_bridge_satisfies_protocol(self, bridge: MemberAccessBridge) -> None:
        assert isinstance(bridge, MemberAccess)

    def test_custom_implementation_satisfies_protocol(self) -> None:
        class Recording:
            def get_member(self, target: Any, name: str) -> Any:
                return None

            def invoke_member(self, target: Any, name: str, args: Any = (), kwargs: Any = None) -> Any:
                return None

        assert isinstance(Recording(), MemberAccess)


class TestGetMember:
    def test_single_underscore_attribute(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member(Vault(), "_attempts") == 0

    def test_mangled_instance_attribute(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member(Vault("abc"), "__secret") == "abc"

    def test_mangled_attribute_through_subclass(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member(SubVault("xyz"), "__secret") == "xyz"

    def test_mangled_class_attribute_from_class(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member(Vault, "__MASTER") == "m4ster"

    def test_class_by_name(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member("string.Template", "delimiter") == "$"

    def test_missing_member(self, bridge: MemberAccessBridge) -> None:
        with pytest.raises(AttributeError):
            bridge.get_member(Vault(), "_nope")

    def test_dunder_names_not_mangled(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_member(Vault(), "__class__") is Vault

    def test_unknown_class_name_rejected(self, bridge: MemberAccessBridge) -> None:
        with pytest.raises(NotObjectError):
            bridge.get_member("no.such.Vault", "_LIMIT")

    def test_scalar_target_rejected(self, bridge: MemberAccessBridge) -> None:
        with pytest.raises(NotObjectError, match='"target"'):
            bridge.get_member(42, "real")


class TestInvokeMember:
    def test_instance_method(self, bridge: MemberAccessBridge) -> None:
        vault = Vault()
        assert bridge.invoke_member(vault, "_unlock", ["s3cr3t"]) is True
        assert vault._attempts == 1

    def test_mangled_method(self, bridge: MemberAccessBridge) -> None:
        vault = Vault()
        bridge.invoke_member(vault, "__rotate", ["n3w"])
        assert bridge.get_member(vault, "__secret") == "n3w"

    def test_classmethod_on_class(self, bridge: MemberAccessBridge) -> None:
        assert bridge.invoke_member(Vault, "_limit") == 3

    def test_staticmethod_with_kwargs(self, bridge: MemberAccessBridge) -> None:
        assert bridge.invoke_member(Vault, "_hash", ["abc"], {"salt": "#"}) == "#cba"

    def test_non_callable_member(self, bridge: MemberAccessBridge) -> None:
        with pytest.raises(TypeError, match="not callable"):
            bridge.invoke_member(Vault(), "_attempts")


class TestAliases:
    def test_call_protected_method(self, bridge: MemberAccessBridge) -> None:
        assert bridge.call_protected_method(Vault(), "_unlock", ["wrong"]) is False

    def test_get_protected_property(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_protected_property(Vault("p"), "__secret") == "p"

    def test_get_protected_constant_from_instance(self, bridge: MemberAccessBridge) -> None:
        vault = Vault()
        vault._LIMIT = 99  # instance shadow must not leak into the constant
        assert bridge.get_protected_constant(vault, "_LIMIT") == 3

    def test_get_protected_constant_mangled(self, bridge: MemberAccessBridge) -> None:
        assert bridge.get_protected_constant(SubVault, "__MASTER") == "m4ster"
