from __future__ import annotations


class Undefined:
    """Marker for a value that was never bound, as opposed to ``None``.

    There is only ever one instance, ``UNDEFINED``.
    """

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __copy__(self) -> "Undefined":
        return self

    def __deepcopy__(self, memo) -> "Undefined":
        return self

    def __reduce__(self):
        return (Undefined, ())


UNDEFINED = Undefined()
