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
"""Compose a class from a disposal mixin and guard it with a class decorator.

Run with ``python -m examples.composed_usage``.
"""

from __future__ import annotations

from disposeguard import ObjectDisposedException, create
from disposeguard.core.config import Config
from disposeguard.logging import StructlogAdapter

_adapter = StructlogAdapter()
logger = _adapter.get_logger("examples.composed_usage")


class DisposableMixin:
    _disposed = False

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if not self._disposed:
            self._disposed = True
            logger.info("disposed", type=type(self).__name__)


def disposable(cls: type) -> type:
    """Guard the methods of *cls*, including those it inherits from mixins."""
    members: dict[str, object] = {}
    for base in reversed(cls.__mro__[:-1]):
        members.update(vars(base))
    for name, value in members.items():
        guarded = create(name, value)
        if guarded is not value:
            setattr(cls, name, guarded)
    return cls


@disposable
class Person(DisposableMixin):
    def __init__(self, name: str, age: int) -> None:
        self._name = name
        self._age = age
        self._friends: list[str] = []

    def get_name(self) -> str:
        return self._name

    def set_age(self, age: int) -> None:
        self._age = age

    def get_age(self) -> int:
        return self._age

    def add_friend(self, friend: str) -> None:
        self._friends.append(friend)

    def introduce(self) -> str:
        friends = f" My friends are: {', '.join(self._friends)}" if self._friends else " I have no friends yet."
        return f"Hi, I'm {self._name}, I'm {self._age} years old.{friends}"


def main() -> None:
    _adapter.configure(Config({}))
    alice = Person("Alice", 28)
    alice.add_friend("Bob")
    alice.set_age(29)
    logger.info("introduction", text=alice.introduce())

    alice.dispose()
    try:
        alice.introduce()
    except ObjectDisposedException as exc:
        logger.info("expected error", error=str(exc))

    bob = Person("Bob", 32)
    logger.info("other instances unaffected", text=bob.introduce())


if __name__ == "__main__":
    main()
