from typing import List
from furniture.factory.abstract_factory import FurnitureFactory
from demo_utils.logger import Logger


def assemble_room(factory: "FurnitureFactory") -> List[str]:
    """
    Furnish a room with one chair and one table from a single factory,
    print what happens and return the printed actions.
    """
    print("Assembling a room with the chosen factory:")
    chair = factory.create_chair()
    table = factory.create_table()

    actions = [chair.sit(), table.place_object()]
    for line in actions:
        print(f"  {line}")
    Logger().debug("Room assembled with %s furniture", factory.name)
    return actions
