"""
Decoy duck - silent and grounded
"""
from ..core.duck import Duck
from ..strategies.quack.mute_quack import MuteQuack
from ..strategies.fly.fly_no_way import FlyNoWay

class DecoyDuck(Duck):
    
    def __init__(self, duck_id: str = "decoy", logger=None):
        super().__init__(MuteQuack(), FlyNoWay(), duck_id=duck_id, logger=logger)
    
    def display(self):
        print("Looks like a Decoy Duck")

# Factory function for composition
def create_decoy_duck(duck_id: str = "decoy", logger=None):
    return DecoyDuck(duck_id=duck_id, logger=logger)
