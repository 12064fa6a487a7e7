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
"""Method-name filtering — decides which class members get a guard."""

from __future__ import annotations

from typing import Any

CONSTRUCTOR_NAME = "__init__"
DISPOSED_CHECK_NAME = "is_disposed"

RESERVED_NAMES: frozenset[str] = frozenset({CONSTRUCTOR_NAME, DISPOSED_CHECK_NAME})


def is_reserved(name: str) -> bool:
    """Return True if *name* must never be guarded.

    The constructor has to run before any disposal state exists, and the
    disposal check has to stay answerable after disposal.
    """
    return name in RESERVED_NAMES


def should_guard(name: str, candidate: Any) -> bool:
    """Check whether *candidate*, stored under *name*, should be wrapped.

    Rules
    -----
    * Reserved names (``__init__``, ``is_disposed``) are never wrapped.
    * Non-callable values pass through.
    * ``staticmethod`` and ``classmethod`` objects pass through: they are
      callable on Python 3.10+ but never receive an instance.

    Examples
    --------
    >>> should_guard("query", lambda self: None)
    True
    >>> should_guard("is_disposed", lambda self: False)
    False
    >>> should_guard("label", "value")
    False
    """
    if is_reserved(name):
        return False
    if isinstance(candidate, (staticmethod, classmethod)):
        return False
    return callable(candidate)
