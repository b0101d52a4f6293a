"""
Behaviour registry and factory (composition-based)
"""

# Registry of available behaviours
_QUACK_BEHAVIOURS = {}
_FLY_BEHAVIOURS = {}

def register_quack_behaviour(name: str, behaviour_factory):
    _QUACK_BEHAVIOURS[name] = behaviour_factory

def register_fly_behaviour(name: str, behaviour_factory):
    _FLY_BEHAVIOURS[name] = behaviour_factory

def get_quack_behaviour(name: str, config: object = None):
    """Get quack behaviour by name - passes config to factory"""
    if name not in _QUACK_BEHAVIOURS:
        raise ValueError(f"Unknown quack behaviour: {name}")
    return _QUACK_BEHAVIOURS[name](config)

def get_fly_behaviour(name: str, config: object = None):
    """Get fly behaviour by name - passes config to factory"""
    if name not in _FLY_BEHAVIOURS:
        raise ValueError(f"Unknown fly behaviour: {name}")
    return _FLY_BEHAVIOURS[name](config)

def list_available_behaviours():
    """List all available behaviours"""
    return {
        "quack": list(_QUACK_BEHAVIOURS.keys()),
        "fly": list(_FLY_BEHAVIOURS.keys())
    }

# Auto-register behaviours using factory functions
from .quack.quack import create_quack
from .quack.squeak import create_squeak
from .quack.mute_quack import create_mute_quack
from .fly.fly_with_wings import create_fly_with_wings
from .fly.fly_no_way import create_fly_no_way
from .fly.fly_rocket_powered import create_fly_rocket_powered

register_quack_behaviour('quack', create_quack)
register_quack_behaviour('squeak', create_squeak)
register_quack_behaviour('mute_quack', create_mute_quack)
register_fly_behaviour('fly_with_wings', create_fly_with_wings)
register_fly_behaviour('fly_no_way', create_fly_no_way)
register_fly_behaviour('fly_rocket_powered', create_fly_rocket_powered)
