"""Unit tests for the furniture factories and the room assembly client."""

from unittest.mock import MagicMock

import pytest

from furniture.client import assemble_room
from furniture.factory.abstract_factory import FurnitureFactory
from furniture.factory.concrete_factory_modern import ModernFurnitureFactory
from furniture.factory.concrete_factory_victorian import VictorianFurnitureFactory
from furniture.product.abstract_product import Chair, Table


class TestFurnitureFactories:
    """Products handed out by each concrete furniture factory."""

    def test_products_satisfy_interfaces(self, furniture_factory):
        assert isinstance(furniture_factory, FurnitureFactory)
        assert isinstance(furniture_factory.create_chair(), Chair)
        assert isinstance(furniture_factory.create_table(), Table)

    def test_chair_and_table_match(self, furniture_factory):
        """A factory never mixes styles."""
        chair = furniture_factory.create_chair()
        table = furniture_factory.create_table()
        assert chair.style == table.style == furniture_factory.name

    def test_creation_returns_fresh_instances(self, furniture_factory):
        first, second = furniture_factory.create_chair(), furniture_factory.create_chair()
        assert first is not second
        assert first.sit() == second.sit()

    def test_creation_is_logged(self, furniture_factory, log_messages):
        furniture_factory.create_chair()
        furniture_factory.create_table()

        name = furniture_factory.name
        assert log_messages == [f"Creating {name} chair", f"Creating {name} table"]

    @pytest.mark.parametrize(
        "factory_cls, chair_text, table_text",
        [
            (ModernFurnitureFactory,
             "Sitting on a modern chair.",
             "Placing an object on a modern table."),
            (VictorianFurnitureFactory,
             "Sitting on an elegant Victorian chair.",
             "Placing an object on a decorated Victorian table."),
        ],
    )
    def test_actions(self, factory_cls, chair_text, table_text):
        factory = factory_cls()
        assert factory.create_chair().sit() == chair_text
        assert factory.create_table().place_object() == table_text


class TestAssembleRoom:
    """The client only talks to the abstract factory."""

    def test_one_chair_and_one_table(self):
        """Exactly one sit and one place action, from products of the given factory."""
        chair = MagicMock(spec=Chair)
        chair.sit.return_value = "sit"
        table = MagicMock(spec=Table)
        table.place_object.return_value = "place"
        factory = MagicMock(spec=FurnitureFactory)
        factory.name = "mock"
        factory.create_chair.return_value = chair
        factory.create_table.return_value = table

        actions = assemble_room(factory)

        factory.create_chair.assert_called_once_with()
        factory.create_table.assert_called_once_with()
        chair.sit.assert_called_once_with()
        table.place_object.assert_called_once_with()
        assert actions == ["sit", "place"]

    def test_modern_room(self, capsys):
        actions = assemble_room(ModernFurnitureFactory())

        assert len(actions) == 2
        assert all("modern" in line for line in actions)
        assert not any("Victorian" in line for line in actions)
        out = capsys.readouterr().out
        assert "Sitting on a modern chair." in out
        assert "Placing an object on a modern table." in out

    def test_victorian_room(self, capsys):
        actions = assemble_room(VictorianFurnitureFactory())

        assert len(actions) == 2
        assert all("Victorian" in line for line in actions)
        assert not any("modern" in line for line in actions)
        assert "Sitting on an elegant Victorian chair." in capsys.readouterr().out
