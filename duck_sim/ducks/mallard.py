"""
Mallard duck - quacks and flies with wings
"""
from ..core.duck import Duck
from ..strategies.quack.quack import Quack
from ..strategies.fly.fly_with_wings import FlyWithWings

class MallardDuck(Duck):
    
    def __init__(self, duck_id: str = "mallard", logger=None):
        super().__init__(Quack(), FlyWithWings(), duck_id=duck_id, logger=logger)
    
    def display(self):
        print("Looks like a Mallard Duck")

# Factory function for composition
def create_mallard_duck(duck_id: str = "mallard", logger=None):
    return MallardDuck(duck_id=duck_id, logger=logger)
