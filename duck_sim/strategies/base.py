"""
Behaviour interfaces (no inheritance, just protocol definition)
"""

# These are just for documentation - we use duck typing
class QuackBehaviour:
    """Interface for quack behaviours (composition-based)"""
    def quack(self):
        """Make whatever noise this behaviour makes"""
        pass

class FlyBehaviour:
    """Interface for fly behaviours (composition-based)"""
    def fly(self):
        """Fly (or not) the way this behaviour flies"""
        pass


def conforms_to(behaviour, action: str) -> bool:
    """True if the behaviour is an instance exposing a callable for the given action"""
    if behaviour is None or isinstance(behaviour, type):
        return False
    return callable(getattr(behaviour, action, None))
