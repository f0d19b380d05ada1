"""MemberAccess Protocol for the reflection bridge extension point.

Defines the structural interface a member-access bridge must satisfy.
Test suites can plug in their own implementation (for example one that
records every access) without inheriting from any base class: any class
with conformant ``get_member`` and ``invoke_member`` methods passes
``isinstance`` checks.

Example::

    from extra_asserts.protocols import MemberAccess

    class RecordingBridge:
        def get_member(self, target, name):
            ...

        def invoke_member(self, target, name, args=(), kwargs=None):
            ...

    assert isinstance(RecordingBridge(), MemberAccess)  # True
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MemberAccess(Protocol):
    """Structural protocol for reaching non-public members of a class.

    ``target`` is an instance, a class, or a string naming an existing class.
    """

    def get_member(self, target: Any, name: str) -> Any: ...

    def invoke_member(
        self,
        target: Any,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any: ...
