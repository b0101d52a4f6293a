"""
Model duck - starts grounded, usually gets a rocket swapped in at runtime
"""
from ..core.duck import Duck
from ..strategies.quack.quack import Quack
from ..strategies.fly.fly_no_way import FlyNoWay

class ModelDuck(Duck):
    
    def __init__(self, duck_id: str = "model", logger=None):
        super().__init__(Quack(), FlyNoWay(), duck_id=duck_id, logger=logger)
    
    def display(self):
        print("Looks like a Model Duck")

# Factory function for composition
def create_model_duck(duck_id: str = "model", logger=None):
    return ModelDuck(duck_id=duck_id, logger=logger)
