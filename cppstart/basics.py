"""A small record type and a printout of basic values."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass
from typing import Optional, Sequence

# double, int, char[20], char, char[3], padded to the alignment of double.
_USER_LAYOUT = struct.Struct("@di20sc3s0d")
_NAME_BYTES = 20
_CODE_BYTES = 3


@dataclass
class User:
    """A user record with fixed-size text fields."""

    salary: float
    age: int
    name: str
    gender: str
    code: str

    def __post_init__(self) -> None:
        if len(self.name.encode()) >= _NAME_BYTES:
            raise ValueError(f"name must be shorter than {_NAME_BYTES} bytes")
        if len(self.code.encode()) >= _CODE_BYTES:
            raise ValueError(f"code must be shorter than {_CODE_BYTES} bytes")
        if len(self.gender.encode()) != 1:
            raise ValueError("gender must be a single one-byte character")

    def struct_size(self) -> int:
        """Size in bytes of the record in native memory layout."""
        return _USER_LAYOUT.size

    def describe(self) -> str:
        return (
            f"name = {self.name}, gender = {self.gender}, code = {self.code}, "
            f"age = {self.age}, salary = {self.salary:f}"
        )


def report() -> str:
    """Text listing a few characters, integers, a float and a sample user."""
    letters = {name: name for name in "abcde"}
    lines = [f"{name} = {value}" for name, value in letters.items()]
    lines.append(f"a1 = {0x20:d}")
    lines.append(f"a2 = {0x50:d}")
    lines.append(f"a3 = {12.25:f}")
    user = User(10000, 18, "ABC", "m", "M1")
    lines.append(f"u1.{user.describe()}")
    lines.append(f"sizeof(u1) = {user.struct_size()}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the report."""
    argparse.ArgumentParser(description="Print basic values.").parse_args(argv)
    print(report())
    return 0