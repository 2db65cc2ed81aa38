from __future__ import annotations
from typing import Iterable, List, NamedTuple, Tuple, Union

from pydantic import BaseModel, Field


class Point(NamedTuple):
    x: int
    y: int


PointLike = Union[Point, Tuple[int, int]]


def as_point(p: PointLike) -> Point:
    x, y = p
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"Point coordinates must be integers, got {p!r}")
    return Point(x, y)


class Signature(BaseModel):
    """
    Signature manuscrite : suite ordonnée de points (ordre = ordre du tracé).
    - ajout en fin uniquement pendant la saisie
    - remplacement complet au chargement / reset
    - pas de dédoublonnage
    """
    points: List[Point] = Field(default_factory=list)

    @classmethod
    def from_points(cls, points: Iterable[PointLike] = ()) -> "Signature":
        return cls(points=[as_point(p) for p in points])

    def append(self, point: PointLike) -> None:
        self.points.append(as_point(point))

    def to_list(self) -> Tuple[Point, ...]:
        return tuple(self.points)

    def replace(self, points: Iterable[PointLike]) -> None:
        self.points = [as_point(p) for p in points]

    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)
