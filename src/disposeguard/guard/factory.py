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
"""Guard factory — wraps methods with a disposed-state check."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from disposeguard.guard.filter import DISPOSED_CHECK_NAME, should_guard
from disposeguard.kernel.exceptions import DisposedCheckMissingException, ObjectDisposedException

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GUARDED_ATTR = "__disposeguard_guarded__"


def create(name: str, candidate: T) -> T | Callable[..., Any]:
    """Return *candidate* or a guard wrapper around it.

    If *name* is reserved or *candidate* is not a method (see
    :func:`~disposeguard.guard.filter.should_guard`), *candidate* itself is
    returned. Otherwise a new function is returned that, when called with a
    receiver as its first argument, asks ``receiver.is_disposed()`` first:

    * truthy — :class:`ObjectDisposedException` is raised and *candidate*
      is not called.
    * falsy — ``candidate(receiver, *args, **kwargs)`` runs and its result
      (or exception) is passed through untouched.

    Usage::

        MyClass.query = create("query", MyClass.query)
    """
    if not should_guard(name, candidate):
        return candidate

    logger.debug("Guarding method %s", name)
    return _build_guard(name, candidate)  # type: ignore[arg-type]


def is_guarded(value: Any) -> bool:
    """Return True if *value* is a wrapper produced by :func:`create`."""
    return getattr(value, _GUARDED_ATTR, False) is True


def _build_guard(name: str, original: Callable[..., Any]) -> Callable[..., Any]:
    """Build the wrapper that checks disposal before delegating to *original*."""

    @functools.wraps(original)
    def disposable_guard(receiver: Any, *args: Any, **kwargs: Any) -> Any:
        check = getattr(receiver, DISPOSED_CHECK_NAME, None)
        if check is None or not callable(check):
            raise DisposedCheckMissingException(name, receiver)

        if check():
            raise ObjectDisposedException(name, receiver)

        return original(receiver, *args, **kwargs)

    setattr(disposable_guard, _GUARDED_ATTR, True)
    return disposable_guard
