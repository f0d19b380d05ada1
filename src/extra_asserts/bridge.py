"""MemberAccessBridge: read or call non-public members of a class in tests.

Python has no enforced visibility, so "non-public" means underscore names.
Double-underscore names are rewritten by the compiler (``__secret`` on
class ``Vault`` is stored as ``_Vault__secret``); the bridge resolves them
by trying the mangled form for every class in the target's MRO.

Targets may be an instance, a class, or a string naming an existing class
(``"package.module.Vault"``).  Strings are resolved through
``extra_asserts.kinds.resolve_class``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from extra_asserts.asserts import assert_is_object_or_existing_class
from extra_asserts.kinds import resolve_class

__all__ = ["MemberAccessBridge"]

logger = logging.getLogger(__name__)


class MemberAccessBridge:
    """Reflection bridge satisfying the ``MemberAccess`` protocol.

    Example::

        class Vault:
            _LIMIT = 3

            def __init__(self):
                self.__secret = "s3cr3t"

            def _unlock(self, code):
                return code == self.__secret

        bridge = MemberAccessBridge()
        vault = Vault()
        bridge.get_member(vault, "__secret")                 # "s3cr3t"
        bridge.invoke_member(vault, "_unlock", ["s3cr3t"])   # True
        bridge.get_protected_constant(Vault, "_LIMIT")       # 3
    """

    def get_member(self, target: Any, name: str) -> Any:
        """Return attribute ``name`` of ``target``, resolving mangled names.

        Raises:
            NotObjectError: If ``target`` is neither an object nor a string
                naming an existing class.
            AttributeError: If no such member exists.
        """
        owner = self._resolve_target(target)
        attr = self._attribute_name(owner, name)
        logger.debug("reading member %r of %r", attr, owner)
        return getattr(owner, attr)

    def invoke_member(
        self,
        target: Any,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call method ``name`` of ``target`` with ``args`` and ``kwargs``.

        Raises:
            TypeError: If the member exists but is not callable.
        """
        member = self.get_member(target, name)
        if not callable(member):
            raise TypeError(f"member {name!r} of {target!r} is not callable")
        return member(*args, **(kwargs or {}))

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    def call_protected_method(
        self, cls_or_obj: Any, method_name: str, args: Sequence[Any] = ()
    ) -> Any:
        return self.invoke_member(cls_or_obj, method_name, args)

    def get_protected_property(self, cls_or_obj: Any, name: str) -> Any:
        return self.get_member(cls_or_obj, name)

    def get_protected_constant(self, cls_or_obj: Any, name: str) -> Any:
        """Return class-level attribute ``name``, even when given an instance."""
        owner = self._resolve_target(cls_or_obj)
        cls = owner if isinstance(owner, type) else type(owner)
        return getattr(cls, self._attribute_name(cls, name))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_target(self, target: Any) -> Any:
        assert_is_object_or_existing_class(target, "target")
        if isinstance(target, str):
            return resolve_class(target)
        return target

    def _attribute_name(self, owner: Any, name: str) -> str:
        if not name.startswith("__") or name.endswith("__"):
            return name
        cls = owner if isinstance(owner, type) else type(owner)
        for klass in cls.__mro__:
            mangled = f"_{klass.__name__.lstrip('_')}{name}"
            if hasattr(owner, mangled):
                return mangled
        return name
