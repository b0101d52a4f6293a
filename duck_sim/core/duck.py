"""
Duck base class.
Holds one quack and one fly behaviour and delegates to whichever is current.
"""

from abc import ABC, abstractmethod
from ..strategies.base import conforms_to


class Duck(ABC):
    """
    Abstract duck.
    Both behaviours are required up front, so a duck is never missing one.
    """
    
    def __init__(self, quack_behaviour, fly_behaviour, duck_id: str = "duck", logger=None):
        self.id = duck_id
        self.logger = logger
        self.quack_behaviour = self.check_behaviour(quack_behaviour, "quack")
        self.fly_behaviour = self.check_behaviour(fly_behaviour, "fly")
    
    @staticmethod
    def check_behaviour(behaviour, action: str):
        """Return the behaviour if it conforms, raise TypeError otherwise"""
        if not conforms_to(behaviour, action):
            raise TypeError(
                f"{type(behaviour).__name__} is not a {action} behaviour "
                f"(needs a callable '{action}' method)"
            )
        return behaviour
    
    def perform_quack(self):
        """Delegate to the current quack behaviour"""
        self.quack_behaviour.quack()
    
    def perform_fly(self):
        """Delegate to the current fly behaviour"""
        self.fly_behaviour.fly()
    
    def set_quack_behaviour(self, behaviour):
        self.quack_behaviour = self._swap("quack", self.quack_behaviour, behaviour)
    
    def set_fly_behaviour(self, behaviour):
        self.fly_behaviour = self._swap("fly", self.fly_behaviour, behaviour)
    
    def _swap(self, action: str, old, new):
        self.check_behaviour(new, action)
        if self.logger:
            self.logger.log(
                f"{self.id}: {action} behaviour {behaviour_name(old)} -> {behaviour_name(new)}",
                "info"
            )
        return new
    
    def swim(self):
        print("All ducks float, even decoys!")
    
    @abstractmethod
    def display(self):
        """Print what this duck looks like"""
        pass
    
    def __repr__(self):
        return (f"{type(self).__name__}(id={self.id!r}, "
                f"quack={behaviour_name(self.quack_behaviour)}, "
                f"fly={behaviour_name(self.fly_behaviour)})")


def behaviour_name(behaviour) -> str:
    return getattr(behaviour, "name", type(behaviour).__name__)
