"""A class with a single shared instance."""

from __future__ import annotations


class Singleton:
    """Obtain the shared instance with get_instance(); copies are independent."""

    data: int

    def __init__(self) -> None:
        raise TypeError("use Singleton.get_instance()")

    @classmethod
    def get_instance(cls) -> Singleton:
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = object.__new__(cls)
            instance.data = 0
            cls._instance = instance
        return instance

    def __copy__(self) -> Singleton:
        duplicate = object.__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        return duplicate


def main(argv: list[str] | None = None) -> int:
    """Show that all handles share the instance while a copy does not."""
    import copy

    s1 = Singleton.get_instance()
    s1.data = 10
    print(f"s1.data={s1.data}")
    s2 = Singleton.get_instance()
    print(f"s2.data={s2.data}")
    s2.data = 20
    print(f"s1.data={s1.data}")
    print(f"s2.data={s2.data}")
    s_copy = copy.copy(s1)
    s_copy.data = 30
    print(f"s_copy.data={s_copy.data}")
    print(f"s1.data={s1.data}")
    print(f"s2.data={s2.data}")
    return 0