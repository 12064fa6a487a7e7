# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Exception hierarchy for disposeguard.

All library exceptions inherit from DisposeGuardException. The concrete
errors also inherit from the builtin that describes their kind, so callers
can catch ``TypeError`` or ``AttributeError`` without importing this module.

Categories:
- ObjectDisposedException: a guarded method was called on a disposed object
- DisposedCheckMissingException: the receiver has no ``is_disposed`` predicate
"""

from __future__ import annotations

from typing import Any

OBJECT_DISPOSED_MESSAGE = "Object is disposed"


class DisposeGuardException(Exception):
    """Base exception for all disposeguard errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "OBJECT_DISPOSED").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ObjectDisposedException(DisposeGuardException, TypeError):
    """A guarded method was invoked after its receiver was disposed.

    The message is always ``"Object is disposed"``.
    """

    def __init__(self, method_name: str | None = None, receiver: Any = None) -> None:
        context: dict[str, Any] = {}
        if method_name is not None:
            context["method"] = method_name
        if receiver is not None:
            context["receiver"] = type(receiver).__name__
        super().__init__(OBJECT_DISPOSED_MESSAGE, code="OBJECT_DISPOSED", context=context)


class DisposedCheckMissingException(DisposeGuardException, AttributeError):
    """The receiver of a guarded method exposes no callable ``is_disposed``."""

    def __init__(self, method_name: str | None = None, receiver: Any = None) -> None:
        type_name = type(receiver).__name__
        super().__init__(
            f"'{type_name}' object has no callable 'is_disposed'",
            code="DISPOSED_CHECK_MISSING",
            context={"method": method_name, "receiver": type_name},
        )
