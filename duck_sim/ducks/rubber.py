"""
Rubber duck - squeaks, can't fly
"""
from ..core.duck import Duck
from ..strategies.quack.squeak import Squeak
from ..strategies.fly.fly_no_way import FlyNoWay

class RubberDuck(Duck):
    
    def __init__(self, duck_id: str = "rubber", logger=None):
        super().__init__(Squeak(), FlyNoWay(), duck_id=duck_id, logger=logger)
    
    def display(self):
        print("Looks like a Rubber Duck")

# Factory function for composition
def create_rubber_duck(duck_id: str = "rubber", logger=None):
    return RubberDuck(duck_id=duck_id, logger=logger)
