from .abstract_product import Chair, Table

STYLE = "victorian"

# --- Concrete Products - Victorian style ---

class VictorianChair(Chair):
    style = STYLE

    def sit(self) -> str:
        return "Sitting on an elegant Victorian chair."


class VictorianTable(Table):
    style = STYLE

    def place_object(self) -> str:
        return "Placing an object on a decorated Victorian table."
