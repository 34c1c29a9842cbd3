from abc import ABC, abstractmethod

# --- Abstract Products ---

class Chair(ABC):
    style: str = ""

    @abstractmethod
    def sit(self) -> str: ...


class Table(ABC):
    style: str = ""

    @abstractmethod
    def place_object(self) -> str: ...
