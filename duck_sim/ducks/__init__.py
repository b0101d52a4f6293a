"""
Duck registry and factory
"""

# Registry of available duck kinds
_DUCKS = {}

def register_duck(kind: str, duck_factory):
    _DUCKS[kind] = duck_factory

def create_duck(kind: str, duck_id: str = None, logger=None):
    """Create a duck by kind. The id defaults to the kind name."""
    if kind not in _DUCKS:
        raise ValueError(f"Unknown duck type: {kind}")
    return _DUCKS[kind](duck_id=duck_id or kind, logger=logger)

def list_available_ducks():
    """List all available duck kinds"""
    return list(_DUCKS.keys())

# Auto-register ducks using factory functions
from .mallard import create_mallard_duck
from .redhead import create_redhead_duck
from .rubber import create_rubber_duck
from .decoy import create_decoy_duck
from .model import create_model_duck

register_duck('mallard', create_mallard_duck)
register_duck('redhead', create_redhead_duck)
register_duck('rubber', create_rubber_duck)
register_duck('decoy', create_decoy_duck)
register_duck('model', create_model_duck)
