from dataclasses import dataclass
from typing import Annotated, overload

from sigresolve import (
    AmbiguousResolutionError,
    Integer,
    Long,
    MemberQuery,
    Modifier,
    Primitive,
    Signature,
    configure_logging,
    find_matching_constructor,
    marked,
    resolve,
)


@dataclass(frozen=True)
class Since:
    version: str


class Encoder:
    """Writes values, with one overload per accepted slot type."""

    def __init__(self) -> None:
        self.out: list[str] = []

    @overload
    def write(self, value: Annotated[int, Primitive.INT]) -> None: ...

    @overload
    def write(self, value: Annotated[int, Primitive.LONG]) -> None: ...

    @overload
    def write(self, value: str) -> None: ...

    def write(self, value):
        self.out.append(repr(value))

    @marked(Since("0.2"))
    def flush(self) -> list[str]:
        out, self.out = self.out, []
        return out


class Point:
    @overload
    def __init__(
        self, x: Annotated[float, Primitive.DOUBLE], y: Annotated[float, Primitive.DOUBLE]
    ) -> None: ...

    @overload
    def __init__(self, name: str) -> None: ...

    def __init__(self, *args):
        self.args = args


def main() -> None:
    configure_logging(level="DEBUG")

    # Plain signatures
    f_long = Signature((Primitive.LONG,), name="f")
    f_double = Signature((Primitive.DOUBLE,), name="f")
    print("f(int) ->", resolve([f_double, f_long], (Primitive.INT,)))

    crossed = [
        Signature((Primitive.INT, object), name="g"),
        Signature((Primitive.LONG, str), name="g"),
    ]
    try:
        resolve(crossed, (Primitive.INT, str))
    except AmbiguousResolutionError as e:
        print(e)

    # Members of live classes
    writes = MemberQuery(Encoder).methods().named("write")
    for value in (Integer(1), Long(2), "three", None):
        print(f"write({value!r}) ->", writes.find_best_for(value))

    tagged = MemberQuery(Encoder).marked_with(Since).without_modifiers(Modifier.PRIVATE)
    print("marked:", tagged.find_all())

    print("Point('origin') ->", find_matching_constructor(Point, "origin"))


if __name__ == "__main__":
    main()
