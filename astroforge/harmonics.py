"""Reading spherical-harmonic gravity model coefficients from CSV files."""

from __future__ import annotations

import csv
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from typing import TextIO, Union

_FIELDS = ("i", "j", "ci", "cj", "di", "dj")


@dataclass(frozen=True)
class Harmonic:
    """One coefficient pair of degree ``i`` and order ``j`` with its errors."""

    i: int
    j: int
    ci: float
    cj: float
    di: float
    dj: float


def _index(text: str, name: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def read_harmonics(stream: TextIO) -> Iterator[Harmonic]:
    """Parse CSV rows with the header ``i,j,ci,cj,di,dj`` into harmonics."""
    reader = csv.DictReader(stream)
    missing = [name for name in _FIELDS if name not in (reader.fieldnames or ())]
    if missing:
        raise ValueError(f"missing columns: {', '.join(missing)}")
    for line, row in enumerate(reader, start=2):
        try:
            yield Harmonic(
                i=_index(row["i"], "i"),
                j=_index(row["j"], "j"),
                ci=float(row["ci"]),
                cj=float(row["cj"]),
                di=float(row["di"]),
                dj=float(row["dj"]),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"line {line}: {exc}") from exc


@dataclass
class EGM:
    """An Earth gravity model: coefficients keyed by degree and order."""

    path: str
    harmonics: dict[tuple[int, int], Harmonic] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: Union[str, PathLike[str]]) -> EGM:
        """Load a model from a CSV file; later rows replace earlier duplicates."""
        with open(path, newline="", encoding="utf-8") as stream:
            harmonics = {(h.i, h.j): h for h in read_harmonics(stream)}
        return cls(str(path), harmonics)

    def coefficients(self, i: int, j: int) -> tuple[float, float]:
        """The coefficient pair of degree ``i`` and order ``j``."""
        harmonic = self.harmonics[(i, j)]
        return harmonic.ci, harmonic.cj

    def errors(self, i: int, j: int) -> tuple[float, float]:
        """The error pair of degree ``i`` and order ``j``."""
        harmonic = self.harmonics[(i, j)]
        return harmonic.di, harmonic.dj