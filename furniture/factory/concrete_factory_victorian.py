from .abstract_factory import FurnitureFactory
from ..product.abstract_product import Chair, Table
from ..product.concrete_products_victorian import VictorianChair, VictorianTable
from demo_utils.logger import Logger

class VictorianFurnitureFactory(FurnitureFactory):
    name = "victorian"

    def create_chair(self) -> Chair:
        Logger().debug("Creating victorian chair")
        return VictorianChair()

    def create_table(self) -> Table:
        Logger().debug("Creating victorian table")
        return VictorianTable()
