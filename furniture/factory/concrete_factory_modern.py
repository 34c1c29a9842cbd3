from .abstract_factory import FurnitureFactory
from ..product.abstract_product import Chair, Table
from ..product.concrete_products_modern import ModernChair, ModernTable
from demo_utils.logger import Logger

class ModernFurnitureFactory(FurnitureFactory):
    name = "modern"

    def create_chair(self) -> Chair:
        Logger().debug("Creating modern chair")
        return ModernChair()

    def create_table(self) -> Table:
        Logger().debug("Creating modern table")
        return ModernTable()
