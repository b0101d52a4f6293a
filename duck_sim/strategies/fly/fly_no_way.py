"""
Fly no way - for ducks that can't fly (rubber, decoy, model)
"""

class FlyNoWay:
    """Grounded"""
    
    def __init__(self):
        self.name = "fly_no_way"
        self.description = "Cannot fly"
    
    def fly(self):
        print("I can't fly")

# Factory function for composition
def create_fly_no_way(config=None):
    return FlyNoWay()
