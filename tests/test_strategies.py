"""
Test the behaviour registry and factories.
"""
import pytest

from duck_sim import strategies
from duck_sim.strategies import (
    get_quack_behaviour, get_fly_behaviour, list_available_behaviours,
    register_fly_behaviour,
)
from duck_sim.strategies.base import conforms_to
from duck_sim.strategies.quack.quack import Quack
from duck_sim.strategies.quack.squeak import Squeak
from duck_sim.strategies.quack.mute_quack import MuteQuack
from duck_sim.strategies.fly.fly_with_wings import FlyWithWings
from duck_sim.strategies.fly.fly_no_way import FlyNoWay
from duck_sim.strategies.fly.fly_rocket_powered import FlyRocketPowered


def test_behaviour_factories():
    """Verify all behaviour factories create their behaviours"""
    print("Testing: Behaviour factory instantiation...")
    assert isinstance(get_quack_behaviour("quack"), Quack)
    assert isinstance(get_quack_behaviour("squeak"), Squeak)
    assert isinstance(get_quack_behaviour("mute_quack"), MuteQuack)
    assert isinstance(get_fly_behaviour("fly_with_wings"), FlyWithWings)
    assert isinstance(get_fly_behaviour("fly_no_way"), FlyNoWay)
    assert isinstance(get_fly_behaviour("fly_rocket_powered", None), FlyRocketPowered)
    print("✓ All behaviour factories work correctly")


def test_factories_return_fresh_instances():
    assert get_quack_behaviour("quack") is not get_quack_behaviour("quack")


def test_behaviour_names_match_registry():
    available = list_available_behaviours()
    for name in available["quack"]:
        assert get_quack_behaviour(name).name == name
    for name in available["fly"]:
        assert get_fly_behaviour(name).name == name


def test_list_available_behaviours():
    available = list_available_behaviours()
    assert {"quack", "squeak", "mute_quack"} <= set(available["quack"])
    assert {"fly_with_wings", "fly_no_way", "fly_rocket_powered"} <= set(available["fly"])


def test_unknown_behaviours():
    with pytest.raises(ValueError, match="Unknown quack behaviour: honk"):
        get_quack_behaviour("honk")
    with pytest.raises(ValueError, match="Unknown fly behaviour: teleport"):
        get_fly_behaviour("teleport")
    # Slots don't share a namespace
    with pytest.raises(ValueError):
        get_fly_behaviour("quack")


def test_register_custom_behaviour(capsys, monkeypatch):
    class Hover:
        name = "hover"
        def fly(self):
            print("Hovering")
    
    monkeypatch.setattr(strategies, "_FLY_BEHAVIOURS", dict(strategies._FLY_BEHAVIOURS))
    register_fly_behaviour("hover", lambda config: Hover())
    get_fly_behaviour("hover").fly()
    assert capsys.readouterr().out == "Hovering\n"
    assert "hover" in list_available_behaviours()["fly"]


@pytest.mark.parametrize("behaviour, action, expected", [
    (Quack(), "quack", "Quack\n"),
    (Squeak(), "quack", "Squeak\n"),
    (MuteQuack(), "quack", "<< Silence >>\n"),
    (FlyWithWings(), "fly", "I'm flying!!\n"),
    (FlyNoWay(), "fly", "I can't fly\n"),
    (FlyRocketPowered(), "fly", "I'm flying with a rocket!\n"),
])
def test_behaviour_output(capsys, behaviour, action, expected):
    result = getattr(behaviour, action)()
    assert result is None
    assert capsys.readouterr().out == expected


def test_conforms_to():
    assert conforms_to(Quack(), "quack")
    assert not conforms_to(Quack(), "fly")
    assert not conforms_to(None, "quack")
    assert not conforms_to(Quack, "quack")
