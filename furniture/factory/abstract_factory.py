from abc import ABC, abstractmethod
from ..product.abstract_product import Chair, Table
# ──────────────────────────────────────────────────────────────
# Abstract Factory
# ──────────────────────────────────────────────────────────────

class FurnitureFactory(ABC):
    name: str = ""

    @abstractmethod
    def create_chair(self) -> Chair: ...

    @abstractmethod
    def create_table(self) -> Table: ...
