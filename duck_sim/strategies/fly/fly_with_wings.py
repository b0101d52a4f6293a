"""
Fly with wings - the way real ducks fly
"""

class FlyWithWings:
    """Flapping-wing flight"""
    
    def __init__(self):
        self.name = "fly_with_wings"
        self.description = "Fly by flapping wings"
    
    def fly(self):
        print("I'm flying!!")

# Factory function for composition
def create_fly_with_wings(config=None):
    return FlyWithWings()
