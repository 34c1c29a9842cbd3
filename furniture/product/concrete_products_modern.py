from .abstract_product import Chair, Table

STYLE = "modern"

# --- Concrete Products - Modern style ---

class ModernChair(Chair):
    style = STYLE

    def sit(self) -> str:
        return "Sitting on a modern chair."


class ModernTable(Table):
    style = STYLE

    def place_object(self) -> str:
        return "Placing an object on a modern table."
