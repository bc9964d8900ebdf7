"""Registry of students allowed to buy at the canteen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

__all__ = ["Student", "StudentRegistry", "DuplicateStudentError"]


class DuplicateStudentError(Exception):
    """A student with this enrollment number is already registered."""

    def __init__(self, enrollment: int) -> None:
        super().__init__("Matricula ja cadastrada.")
        self.enrollment = enrollment


@dataclass
class Student:
    name: str
    enrollment: int


class StudentRegistry:
    """Students in registration order, looked up by enrollment number."""

    def __init__(self) -> None:
        self._students: dict[int, Student] = {}

    def register(self, name: str, enrollment: int) -> Student:
        """Add a student and return it."""
        if enrollment in self._students:
            raise DuplicateStudentError(enrollment)
        student = Student(name, enrollment)
        self._students[enrollment] = student
        return student

    def find(self, enrollment: int) -> Optional[Student]:
        """Return the student with this enrollment number, or None."""
        return self._students.get(enrollment)

    def render(self) -> str:
        """Return the student list as the text shown to the operator."""
        parts = ["\n======= LISTA DE ALUNOS =======\n"]
        if not self._students:
            parts.append("Lista de alunos invalida ou vazia\n")
        parts.extend(f"[{s.enrollment}] {s.name}\n" for s in self)
        parts.append("================================\n")
        return "".join(parts)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students.values()))

    def __len__(self) -> int:
        return len(self._students)