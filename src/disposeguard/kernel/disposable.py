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
"""Disposable protocol — the capability every guarded receiver must offer.

Objects whose methods are wrapped by :func:`disposeguard.guard.create` must
answer ``is_disposed()``. How and when they become disposed is up to them;
this library never flips the flag or releases anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Disposable(Protocol):
    """Objects that can report whether they have been disposed."""

    def is_disposed(self) -> bool:
        """Return True once the object has been disposed.

        Guard wrappers call this before every delegated call, so it must
        stay callable after disposal and should not have side effects.
        """
        ...
