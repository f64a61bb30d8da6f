import pytest

from patternkit.abstract_factory import (
    Adidas,
    AdidasShoe,
    AdidasShort,
    Factory,
    Nike,
    NikeShoe,
    NikeShort,
    Shoe,
    main,
)


@pytest.mark.parametrize(
    "factory, shoe_type, short_type",
    [(Adidas(), AdidasShoe, AdidasShort), (Nike(), NikeShoe, NikeShort)],
)
def test_factory_creates_matching_family(factory, shoe_type, short_type):
    assert type(factory.create_shoe()) is shoe_type
    assert type(factory.create_short()) is short_type


def test_introductions():
    assert Adidas().create_shoe().introduce() == "Introducing on a Adidas style Short."
    assert Nike().create_short().introduce() == "Introducing on a Nike style Short."


def test_factory_returns_new_objects():
    factory = Nike()
    assert factory.create_shoe() is not factory.create_shoe()
    assert factory.create_shoe().introduce() == factory.create_short().introduce()


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Factory()
    with pytest.raises(TypeError):
        Shoe()


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Introducing on a Adidas style Short.",
        "Introducing on a Adidas style Short.",
        "Introducing on a Nike style Short.",
        "Introducing on a Nike style Short.",
    ]