from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryModel:
    id: int
    name: str
